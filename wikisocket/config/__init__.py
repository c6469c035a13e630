"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- logging: log level and format
- server: bind host/port fallback and WebSocket path
- settings: settings collaborator keys and defaults
- websocket: frame keys and close codes
- protocol: command, event and status names
"""

from .logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT
from .server import SERVER_HOST, SERVER_PORT, SERVER_ACCESS_LOG, WS_PATH
from .settings import (
    SETTING_KEYS,
    SETTING_ENV_VARS,
    PUBLIC_ACCESS_ENABLED_VALUE,
)
from .websocket import (
    WS_TYPE_KEY,
    WS_PAYLOAD_KEY,
    WS_CLOSE_NORMAL_CODE,
    WS_CLOSE_INTERNAL_ERROR_CODE,
    WS_MAX_FRAME_CHARS,
)
from .protocol import (
    STATUS_SUCCESS,
    STATUS_NO_USER,
    STATUS_BAD_USERNAME,
    STATUS_BAD_CODE,
    STATUS_NO_PERMISSION,
    STATUS_BAD_NAME,
    EVENT_GLOBAL_SETTINGS,
    EVENT_GLOBAL_USER_SETTINGS,
    response_event,
)

__all__ = [
    # logging
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
    # server
    "SERVER_HOST",
    "SERVER_PORT",
    "SERVER_ACCESS_LOG",
    "WS_PATH",
    # settings
    "SETTING_KEYS",
    "SETTING_ENV_VARS",
    "PUBLIC_ACCESS_ENABLED_VALUE",
    # websocket
    "WS_TYPE_KEY",
    "WS_PAYLOAD_KEY",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_MAX_FRAME_CHARS",
    # protocol
    "STATUS_SUCCESS",
    "STATUS_NO_USER",
    "STATUS_BAD_USERNAME",
    "STATUS_BAD_CODE",
    "STATUS_NO_PERMISSION",
    "STATUS_BAD_NAME",
    "EVENT_GLOBAL_SETTINGS",
    "EVENT_GLOBAL_USER_SETTINGS",
    "response_event",
]
