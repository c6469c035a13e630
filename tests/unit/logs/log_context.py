"""Unit tests for logging context fields."""

from __future__ import annotations

import asyncio
import logging

from wikisocket.logging import log_context, install_log_context, current_connection_id


def test_log_context_sets_and_restores_connection_id() -> None:
    assert current_connection_id() == "-"
    with log_context(connection_id="abc"):
        assert current_connection_id() == "abc"
    assert current_connection_id() == "-"


def test_records_carry_context_fields() -> None:
    install_log_context()
    with log_context(connection_id="conn-9", command="login"):
        record = logging.getLogRecordFactory()("wikisocket", logging.INFO, __file__, 1, "msg", (), None)

    assert record.connection_id == "conn-9"
    assert record.command == "login"


def test_tasks_inherit_connection_id() -> None:
    async def _run() -> str:
        with log_context(connection_id="conn-task"):
            task = asyncio.create_task(_read())
        return await task

    async def _read() -> str:
        return current_connection_id()

    assert asyncio.run(_run()) == "conn-task"
