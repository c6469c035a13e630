"""Primary WebSocket connection handler orchestration.

Entry point for every client connection:

1. Connection Setup:
   - Accept the socket
   - Allocate the connection session and push global settings

2. Message Routing:
   - Receive frames and dispatch each command as its own task

3. Cleanup:
   - Log the session out, close the outbound channel, discard the session
   - In-flight commands finish on their own; their replies are dropped
"""

from __future__ import annotations

import uuid
import logging
import contextlib
from typing import TYPE_CHECKING

from fastapi import WebSocket

from ...config.websocket import WS_CLOSE_INTERNAL_ERROR_CODE
from ...logging import log_context
from ..lifecycle import ConnectionLifecycle
from .helpers import EventChannel
from .disconnects import is_expected_disconnect
from .message_loop import run_message_loop

if TYPE_CHECKING:
    from ...runtime.dependencies import RuntimeDeps

logger = logging.getLogger(__name__)


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    """Serve one WebSocket connection until it disconnects.

    Args:
        ws: The incoming WebSocket connection from FastAPI.
        runtime_deps: Process-wide services built at startup.
    """
    connection_id = uuid.uuid4().hex[:12]
    with log_context(connection_id=connection_id):
        await ws.accept()
        channel = EventChannel(ws)
        lifecycle = ConnectionLifecycle(channel, runtime_deps.global_settings)
        try:
            session = await lifecycle.on_connect(connection_id)
            logger.info("WebSocket connection accepted")
            await run_message_loop(ws, session, channel, runtime_deps)
        except Exception as exc:  # noqa: BLE001
            if not is_expected_disconnect(exc):
                logger.exception("WebSocket error")
                with contextlib.suppress(Exception):
                    await ws.close(code=WS_CLOSE_INTERNAL_ERROR_CODE)
        finally:
            await lifecycle.on_disconnect()
            logger.info("WebSocket connection closed")


__all__ = ["handle_websocket_connection"]
