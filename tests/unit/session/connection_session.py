"""Unit tests for connection session state and lifecycle."""

from __future__ import annotations

import asyncio

from wikisocket.config.protocol import EVENT_GLOBAL_SETTINGS
from wikisocket.state.session import ConnectionSession
from wikisocket.state.settings import GlobalSettings
from wikisocket.handlers.lifecycle import ConnectionLifecycle, logout_session
from tests.helpers.fakes import RecordingChannel

_SETTINGS = GlobalSettings(community_name="Wiki", welcome_message="Hi", public_access=False)


def test_new_session_is_unauthenticated() -> None:
    session = ConnectionSession()

    assert session.authenticated is False
    assert session.user_id == ""
    assert session.is_forum_admin is False
    assert session.is_forum_moderator is False


def test_sessions_get_distinct_connection_ids() -> None:
    assert ConnectionSession().connection_id != ConnectionSession().connection_id


def test_sign_in_copies_identity_and_roles_as_reported() -> None:
    session = ConnectionSession()
    session.sign_in("42", forum_admin=True, forum_moderator="yes")

    assert session.authenticated is True
    assert session.user_id == "42"
    assert session.is_forum_admin is True
    assert session.is_forum_moderator == "yes"


def test_logout_resets_every_field() -> None:
    session = ConnectionSession()
    session.sign_in("42", forum_admin=True, forum_moderator=True)

    assert logout_session(session) is True
    assert session == ConnectionSession(connection_id=session.connection_id)


def test_logout_is_idempotent() -> None:
    session = ConnectionSession()
    session.sign_in("42", forum_admin=False, forum_moderator=False)

    assert logout_session(session) is True
    assert logout_session(session) is False
    assert logout_session(None) is False
    assert session.authenticated is False


def test_on_connect_pushes_global_settings_to_fresh_session() -> None:
    async def _run() -> None:
        channel = RecordingChannel()
        lifecycle = ConnectionLifecycle(channel, _SETTINGS)

        session = await lifecycle.on_connect("conn-1")

        assert lifecycle.session is session
        assert session.connection_id == "conn-1"
        assert session.authenticated is False
        assert channel.events == [
            (
                EVENT_GLOBAL_SETTINGS,
                {"communityName": "Wiki", "welcomeMessage": "Hi", "publicAccess": False},
            )
        ]

    asyncio.run(_run())


def test_each_connection_gets_its_own_session() -> None:
    async def _run() -> None:
        first = ConnectionLifecycle(RecordingChannel(), _SETTINGS)
        second = ConnectionLifecycle(RecordingChannel(), _SETTINGS)
        session_a = await first.on_connect()
        session_b = await second.on_connect()

        session_a.sign_in("a", forum_admin=True, forum_moderator=False)

        assert session_a is not session_b
        assert session_b.authenticated is False
        assert session_b.is_forum_admin is False

    asyncio.run(_run())


def test_on_disconnect_logs_out_closes_channel_and_drops_session() -> None:
    async def _run() -> None:
        channel = RecordingChannel()
        lifecycle = ConnectionLifecycle(channel, _SETTINGS)
        session = await lifecycle.on_connect()
        session.sign_in("42", forum_admin=True, forum_moderator=False)

        await lifecycle.on_disconnect()

        assert session.authenticated is False
        assert session.user_id == ""
        assert lifecycle.session is None
        assert channel.closed is True
        assert await channel.emit("late", {}) is False

    asyncio.run(_run())


def test_on_disconnect_for_anonymous_session_is_not_an_error() -> None:
    async def _run() -> None:
        lifecycle = ConnectionLifecycle(RecordingChannel(), _SETTINGS)
        await lifecycle.on_connect()

        await lifecycle.on_disconnect()
        await lifecycle.on_disconnect()

        assert lifecycle.session is None

    asyncio.run(_run())
