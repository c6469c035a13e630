"""External collaborator contracts and reference implementations."""

from .base import (
    AuthResult,
    StatusResult,
    ServiceResult,
    UsersService,
    SettingsService,
    DiscussionsService,
)
from .memory import InMemoryUsers, InMemoryDiscussions
from .settings import EnvSettingsStore, StaticSettingsStore

__all__ = [
    "AuthResult",
    "StatusResult",
    "ServiceResult",
    "UsersService",
    "DiscussionsService",
    "SettingsService",
    "InMemoryUsers",
    "InMemoryDiscussions",
    "EnvSettingsStore",
    "StaticSettingsStore",
]
