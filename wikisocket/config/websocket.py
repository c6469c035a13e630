"""WebSocket framing and close-code values.

Frames are JSON objects in both directions:

    inbound:  {"type": "<command>", "payload": <any JSON, optional>}
    outbound: {"type": "<event>",   "payload": {...}}

Close Codes (RFC 6455):
    1000: Normal closure
    1011: Internal error (unexpected failure in the receive loop)
"""

from __future__ import annotations

from ..utils.env import env_int

# ============================================================================
# Frame Keys
# ============================================================================

WS_TYPE_KEY = "type"
WS_PAYLOAD_KEY = "payload"

# ============================================================================
# WebSocket Close Codes
# ============================================================================

WS_CLOSE_NORMAL_CODE = env_int("WS_CLOSE_NORMAL_CODE", 1000)
WS_CLOSE_INTERNAL_ERROR_CODE = env_int("WS_CLOSE_INTERNAL_ERROR_CODE", 1011)

# Largest text frame accepted before parsing; 0 disables the check
WS_MAX_FRAME_CHARS = env_int("WS_MAX_FRAME_CHARS", 65536)

__all__ = [
    "WS_TYPE_KEY",
    "WS_PAYLOAD_KEY",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_MAX_FRAME_CHARS",
]
