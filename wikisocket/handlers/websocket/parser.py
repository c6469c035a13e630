"""Client frame parsing for the WebSocket handler."""

from __future__ import annotations

import json

from ...config.websocket import WS_TYPE_KEY, WS_PAYLOAD_KEY, WS_MAX_FRAME_CHARS
from ..router import Command


def parse_client_message(raw: str | None) -> Command:
    """Turn one text frame into a Command.

    The payload is passed through untouched (absent becomes None); checking
    it is the router's job.

    Raises:
        ValueError: When the frame is empty, oversized, not a JSON object,
            or has no string ``type``.
    """

    text = (raw or "").strip()
    if not text:
        raise ValueError("Empty message.")
    if WS_MAX_FRAME_CHARS and len(text) > WS_MAX_FRAME_CHARS:
        raise ValueError(f"Message exceeds {WS_MAX_FRAME_CHARS} characters.")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError("Message must be valid JSON.") from exc

    if not isinstance(data, dict):
        raise ValueError("Message must be a JSON object.")

    name = data.get(WS_TYPE_KEY)
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Missing '{WS_TYPE_KEY}' in message.")

    return Command(name=name.strip(), payload=data.get(WS_PAYLOAD_KEY))


__all__ = ["parse_client_message"]
