"""Connection session lifecycle.

ConnectionLifecycle owns the ConnectionSession of one WebSocket: it creates
the session when the connection is accepted, pushes the community settings,
and tears the session down on disconnect. Logout is shared with the
``logout`` command and is idempotent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config.protocol import EVENT_GLOBAL_SETTINGS
from ..state.session import ConnectionSession
from ..state.settings import GlobalSettings

if TYPE_CHECKING:
    from .websocket.helpers import EventChannel

logger = logging.getLogger(__name__)


def logout_session(session: ConnectionSession | None) -> bool:
    """Reset ``session`` to the unauthenticated state.

    Returns:
        True when the session was authenticated and has been reset, False
        when there was nothing to do.
    """
    if session is None or not session.authenticated:
        return False
    user_id = session.user_id
    session.reset()
    logger.info("logged out user_id=%s", user_id)
    return True


class ConnectionLifecycle:
    """Creates, resets and discards the session of one connection.

    Attributes:
        session: The live session, or None before connect and after
            disconnect.
    """

    def __init__(self, channel: EventChannel, global_settings: GlobalSettings) -> None:
        self._channel = channel
        self._global_settings = global_settings
        self.session: ConnectionSession | None = None

    async def on_connect(self, connection_id: str | None = None) -> ConnectionSession:
        """Allocate a fresh session and push the global settings."""
        if connection_id is None:
            session = ConnectionSession()
        else:
            session = ConnectionSession(connection_id=connection_id)
        self.session = session
        await self._channel.emit(EVENT_GLOBAL_SETTINGS, self._global_settings.to_payload())
        return session

    def logout(self) -> bool:
        return logout_session(self.session)

    async def on_disconnect(self) -> None:
        """Log out, stop outbound delivery and discard the session."""
        self.logout()
        self._channel.close()
        self.session = None


__all__ = ["ConnectionLifecycle", "logout_session"]
