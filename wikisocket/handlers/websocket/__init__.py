"""WebSocket handler exports."""

from .manager import handle_websocket_connection
from .helpers import EventChannel
from .parser import parse_client_message

__all__ = [
    "handle_websocket_connection",
    "EventChannel",
    "parse_client_message",
]
