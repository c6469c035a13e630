"""Runtime dependency container.

All long-lived runtime services are assembled at startup and passed
explicitly to the connection handler. Nothing in the command layer reaches
for module-level singletons.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from wikisocket.handlers.router import CommandRouter
    from wikisocket.state.settings import GlobalSettings, ServerSettings
    from wikisocket.collaborators.base import UsersService, DiscussionsService


@dataclass(slots=True)
class RuntimeDeps:
    """Process-wide runtime services initialized during startup."""

    users: UsersService
    discussions: DiscussionsService
    global_settings: GlobalSettings
    server_settings: ServerSettings
    router: CommandRouter
