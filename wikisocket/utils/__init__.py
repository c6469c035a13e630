"""Small shared utilities."""

from .env import env_flag, env_int

__all__ = ["env_flag", "env_int"]
