"""WebSocket receive loop and per-command task dispatch."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fastapi import WebSocket, WebSocketDisconnect

from ...config.websocket import WS_CLOSE_NORMAL_CODE
from .parser import parse_client_message

if TYPE_CHECKING:
    from ...state.session import ConnectionSession
    from ...runtime.dependencies import RuntimeDeps
    from .helpers import EventChannel

logger = logging.getLogger(__name__)

# Strong references to in-flight command tasks. A task may outlive its
# connection; its reply is then dropped by the closed channel.
_inflight_commands: set[asyncio.Task[None]] = set()


async def _receive_frame(ws: WebSocket) -> str | None:
    """Return the next text frame, or None for a frame that is not text."""
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", WS_CLOSE_NORMAL_CODE), message.get("reason"))
    text = message.get("text")
    if text is not None:
        return text
    data = message.get("bytes")
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def inflight_command_count() -> int:
    return len(_inflight_commands)


def spawn_command_task(
    session: ConnectionSession,
    channel: EventChannel,
    runtime_deps: RuntimeDeps,
    raw_msg: str,
) -> asyncio.Task[None] | None:
    """Parse one frame and schedule its command; return the task if any."""
    try:
        command = parse_client_message(raw_msg)
    except ValueError as exc:
        logger.warning("dropping malformed frame: %s", exc)
        return None

    task = asyncio.create_task(
        runtime_deps.router.dispatch(
            command,
            session=session,
            channel=channel,
            deps=runtime_deps,
        ),
        name=f"command:{command.name}",
    )
    _inflight_commands.add(task)
    task.add_done_callback(_inflight_commands.discard)
    return task


async def run_message_loop(
    ws: WebSocket,
    session: ConnectionSession,
    channel: EventChannel,
    runtime_deps: RuntimeDeps,
) -> None:
    """Receive frames until disconnect, dispatching each command as a task.

    Commands from one connection run concurrently; a slow aggregation chain
    does not hold back commands received after it.
    """
    while True:
        raw_msg = await _receive_frame(ws)
        if raw_msg is None:
            logger.warning("dropping non-text frame")
            continue
        spawn_command_task(session, channel, runtime_deps, raw_msg)


__all__ = ["run_message_loop", "spawn_command_task", "inflight_command_count"]
