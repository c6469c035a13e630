"""Unit tests for the outbound event channel."""

from __future__ import annotations

import json
import asyncio

import pytest
from fastapi import WebSocketDisconnect

from wikisocket.handlers.websocket.helpers import EventChannel, build_frame


class _FakeWebSocket:
    def __init__(self, error: BaseException | None = None) -> None:
        self.sent: list[str] = []
        self._error = error

    async def send_text(self, text: str) -> None:
        if self._error is not None:
            raise self._error
        self.sent.append(text)


def test_build_frame_wraps_event_and_payload() -> None:
    assert build_frame("loginResponse", {"status": "nouser"}) == {
        "type": "loginResponse",
        "payload": {"status": "nouser"},
    }


def test_emit_sends_json_frame() -> None:
    ws = _FakeWebSocket()
    channel = EventChannel(ws)

    assert asyncio.run(channel.emit("globalSettings", {"publicAccess": True})) is True
    assert [json.loads(text) for text in ws.sent] == [
        {"type": "globalSettings", "payload": {"publicAccess": True}}
    ]


def test_emit_after_close_is_dropped() -> None:
    ws = _FakeWebSocket()
    channel = EventChannel(ws)
    channel.close()

    assert asyncio.run(channel.emit("loadDiscussionsResponse", {})) is False
    assert ws.sent == []


def test_emit_on_disconnected_socket_closes_channel() -> None:
    channel = EventChannel(_FakeWebSocket(WebSocketDisconnect(1001)))

    assert asyncio.run(channel.emit("loginResponse", {"status": "success"})) is False
    assert channel.closed is True


def test_emit_propagates_unexpected_send_errors() -> None:
    channel = EventChannel(_FakeWebSocket(ValueError("not serialisable")))

    with pytest.raises(ValueError):
        asyncio.run(channel.emit("loginResponse", {}))
