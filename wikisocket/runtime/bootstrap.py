"""Runtime dependency bootstrap.

Reads settings from the Settings collaborator once, freezes them, and
assembles the services every connection shares.
"""

from __future__ import annotations

import logging

from wikisocket.config.server import SERVER_PORT
from wikisocket.config.settings import (
    SETTING_PORT,
    SETTING_SITE_ADDRESS,
    SETTING_EMAIL_ADDRESS,
    SETTING_PUBLIC_ACCESS,
    SETTING_COMMUNITY_NAME,
    SETTING_WELCOME_MESSAGE,
    PUBLIC_ACCESS_ENABLED_VALUE,
)
from wikisocket.commands import build_command_router
from wikisocket.state.settings import GlobalSettings, ServerSettings
from wikisocket.collaborators.base import UsersService, SettingsService, DiscussionsService
from wikisocket.collaborators.memory import InMemoryUsers, InMemoryDiscussions
from wikisocket.collaborators.settings import EnvSettingsStore

from .dependencies import RuntimeDeps

logger = logging.getLogger(__name__)


def parse_port(raw: str | None, default: int = SERVER_PORT) -> int:
    """Return a usable TCP port from a stored setting, else ``default``."""
    try:
        port = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if 0 < port < 65536:
        return port
    return default


async def load_settings(store: SettingsService) -> tuple[GlobalSettings, ServerSettings]:
    """Read every setting the server needs from ``store`` exactly once."""
    public_access_raw = await store.get_setting(SETTING_PUBLIC_ACCESS)
    global_settings = GlobalSettings(
        community_name=await store.get_setting(SETTING_COMMUNITY_NAME),
        welcome_message=await store.get_setting(SETTING_WELCOME_MESSAGE),
        public_access=public_access_raw == PUBLIC_ACCESS_ENABLED_VALUE,
    )
    server_settings = ServerSettings(
        port=parse_port(await store.get_setting(SETTING_PORT)),
        email_address=await store.get_setting(SETTING_EMAIL_ADDRESS),
        site_address=await store.get_setting(SETTING_SITE_ADDRESS),
    )
    return global_settings, server_settings


async def build_runtime_deps(
    *,
    users: UsersService | None = None,
    discussions: DiscussionsService | None = None,
    settings_store: SettingsService | None = None,
) -> RuntimeDeps:
    """Build runtime dependencies, defaulting to the in-memory collaborators."""
    global_settings, server_settings = await load_settings(settings_store or EnvSettingsStore())
    logger.info(
        "settings loaded community=%r public_access=%s port=%s",
        global_settings.community_name,
        global_settings.public_access,
        server_settings.port,
    )
    return RuntimeDeps(
        users=users if users is not None else InMemoryUsers(),
        discussions=discussions if discussions is not None else InMemoryDiscussions(),
        global_settings=global_settings,
        server_settings=server_settings,
        router=build_command_router(),
    )


__all__ = [
    "parse_port",
    "load_settings",
    "build_runtime_deps",
]
