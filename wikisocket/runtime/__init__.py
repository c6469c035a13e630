"""Runtime dependency container and startup bootstrap."""

from .dependencies import RuntimeDeps

__all__ = ["RuntimeDeps"]
