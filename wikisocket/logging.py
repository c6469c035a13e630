"""Logging context helpers for consistent structured fields."""

from __future__ import annotations

import logging
import contextlib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_CONNECTION_ID: ContextVar[str] = ContextVar("connection_id", default="-")
_COMMAND: ContextVar[str] = ContextVar("command", default="-")


def set_log_context(
    *,
    connection_id: str | None = None,
    command: str | None = None,
) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if connection_id is not None:
        tokens.append((_CONNECTION_ID, _CONNECTION_ID.set(connection_id)))
    if command is not None:
        tokens.append((_COMMAND, _COMMAND.set(command)))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in reversed(tokens):
        var.reset(token)


@contextmanager
def log_context(
    *,
    connection_id: str | None = None,
    command: str | None = None,
) -> Iterator[None]:
    """Context manager for applying log fields within a block.

    Tasks created inside the block copy the current context, so per-command
    tasks keep logging with their connection and command fields.
    """
    tokens = set_log_context(connection_id=connection_id, command=command)
    try:
        yield
    finally:
        reset_log_context(tokens)


def current_connection_id() -> str:
    return _CONNECTION_ID.get()


def install_log_context() -> None:
    """Install a LogRecord factory that injects context fields."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.connection_id = _CONNECTION_ID.get()
        record.command = _COMMAND.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


def configure_logging() -> None:
    """Initialize root logging configuration once per process."""
    from wikisocket.config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT  # noqa: PLC0415

    install_log_context()
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=APP_LOG_LEVEL, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    else:
        root_logger.setLevel(APP_LOG_LEVEL)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(APP_LOG_LEVEL)
                handler.setFormatter(logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT))

    logging.getLogger("wikisocket").setLevel(APP_LOG_LEVEL)


__all__ = [
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
    "current_connection_id",
    "configure_logging",
]
