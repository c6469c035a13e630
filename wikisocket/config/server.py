"""HTTP/WebSocket server binding values.

SERVER_PORT is only the fallback: the port stored by the Settings
collaborator wins when it holds a usable value.
"""

import os

from ..utils.env import env_int, env_flag


SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = env_int("SERVER_PORT", 8080)
SERVER_ACCESS_LOG = env_flag("SERVER_ACCESS_LOG", False)
WS_PATH = os.getenv("WS_PATH", "/ws")


__all__ = [
    "SERVER_HOST",
    "SERVER_PORT",
    "SERVER_ACCESS_LOG",
    "WS_PATH",
]
