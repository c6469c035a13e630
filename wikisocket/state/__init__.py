"""State dataclasses for sessions and process-wide settings."""

from .session import ConnectionSession
from .settings import GlobalSettings, ServerSettings

__all__ = ["ConnectionSession", "GlobalSettings", "ServerSettings"]
