"""Outbound delivery helpers for WebSocket connections.

EventChannel is the only path by which the command layer writes to a
client. Every frame has the shape ``{"type": <event>, "payload": {...}}``.
Once the connection is gone the channel turns every emit into a no-op, so a
command that finishes after disconnect has its reply discarded instead of
raising.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import WebSocket

from ...config.websocket import WS_TYPE_KEY, WS_PAYLOAD_KEY
from .disconnects import is_expected_disconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    """Send text to the client, returning False if the socket is gone.

    Args:
        ws: The WebSocket connection.
        text: Raw text to send.

    Returns:
        True if sent successfully, False if the client disconnected.
    """
    try:
        await ws.send_text(text)
    except Exception as exc:  # noqa: BLE001
        if not is_expected_disconnect(exc):
            raise
        logger.info("WebSocket disconnected while sending %s bytes", len(text))
        return False
    return True


async def safe_send_json(ws: WebSocket, payload: dict[str, Any]) -> bool:
    """Send a JSON payload, swallowing client disconnects."""
    return await safe_send_text(ws, json.dumps(payload))


def build_frame(event: str, payload: dict[str, Any]) -> dict[str, Any]:
    return {WS_TYPE_KEY: event, WS_PAYLOAD_KEY: payload}


class EventChannel:
    """Per-connection outbound event sink.

    Attributes:
        closed: True once the connection is torn down or a send found the
            socket gone; later emits are dropped.
    """

    def __init__(self, ws: WebSocket) -> None:
        self._ws = ws
        self.closed = False

    def close(self) -> None:
        self.closed = True

    async def emit(self, event: str, payload: dict[str, Any]) -> bool:
        """Send one event; return False when it was dropped."""
        if self.closed:
            logger.debug("dropping %s for closed connection", event)
            return False
        sent = await safe_send_json(self._ws, build_frame(event, payload))
        if not sent:
            self.closed = True
        return sent


__all__ = [
    "safe_send_text",
    "safe_send_json",
    "build_frame",
    "EventChannel",
]
