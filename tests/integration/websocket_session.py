"""End-to-end websocket sessions against the FastAPI app."""

from __future__ import annotations

from fastapi.testclient import TestClient

from wikisocket.server import create_app
from wikisocket.collaborators.memory import InMemoryUsers, InMemoryDiscussions
from wikisocket.collaborators.settings import StaticSettingsStore


def _app(*, public_access: str = "false"):
    users = InMemoryUsers(global_settings={"minPasswordLength": 8})
    users.add_user("admin", "secret", forum_admin=True)
    users.add_user("member", "secret")
    discussions = InMemoryDiscussions()
    discussions.add_thread({"id": 1, "title": "Hello"})
    discussions.add_post({"id": 1, "thread": 1, "body": "First"})
    store = StaticSettingsStore(
        {"community_name": "Test Wiki", "welcome_message": "Hi", "public_access": public_access}
    )
    return create_app(users=users, discussions=discussions, settings_store=store), discussions


def _send(ws, command: str, payload=None) -> None:
    frame = {"type": command}
    if payload is not None:
        frame["payload"] = payload
    ws.send_json(frame)


def test_health_endpoints() -> None:
    app, _ = _app()
    with TestClient(app) as client:
        assert client.get("/").json() == {"status": "ok"}
        assert client.get("/healthz").json() == {"status": "ok"}
        assert client.get("/favicon.ico").status_code == 204


def test_connect_pushes_global_settings() -> None:
    app, _ = _app()
    with TestClient(app) as client, client.websocket_connect("/ws") as ws:
        assert ws.receive_json() == {
            "type": "globalSettings",
            "payload": {"communityName": "Test Wiki", "welcomeMessage": "Hi", "publicAccess": False},
        }


def test_admin_session_manages_forums() -> None:
    app, _ = _app()
    with TestClient(app) as client, client.websocket_connect("/ws") as ws:
        ws.receive_json()

        _send(ws, "login", {"username": "admin", "password": "secret"})
        login = ws.receive_json()
        assert login["type"] == "loginResponse"
        assert login["payload"]["status"] == "success"
        assert login["payload"]["forumAdmin"] is True

        _send(ws, "createDiscussionForum", {"title": "  General "})
        assert ws.receive_json() == {
            "type": "createDiscussionForumResponse",
            "payload": {"status": "success", "forums": [{"id": 1, "title": "General"}]},
        }

        _send(ws, "createDiscussionForum", {"title": "   "})
        assert ws.receive_json()["payload"] == {"status": "badname"}

        _send(ws, "deleteDiscussionForum", {"id": 1})
        assert ws.receive_json() == {
            "type": "deleteDiscussionForumResponse",
            "payload": {"status": "success", "forums": []},
        }

        _send(ws, "deleteDiscussionForum", {"id": 1})
        assert ws.receive_json()["payload"] == {"status": "noforum"}


def test_member_cannot_manage_forums() -> None:
    app, _ = _app()
    with TestClient(app) as client, client.websocket_connect("/ws") as ws:
        ws.receive_json()
        _send(ws, "login", {"username": "member", "password": "secret"})
        assert ws.receive_json()["payload"]["status"] == "success"

        _send(ws, "createDiscussionForum", {"title": "Mine"})
        assert ws.receive_json() == {
            "type": "createDiscussionForumResponse",
            "payload": {"status": "nopermission"},
        }

        _send(ws, "loadDiscussions")
        reply = ws.receive_json()
        assert reply["type"] == "loadDiscussionsResponse"
        assert reply["payload"]["forums"] == []


def test_anonymous_reads_depend_on_public_access() -> None:
    app, _ = _app(public_access="false")
    with TestClient(app) as client, client.websocket_connect("/ws") as ws:
        ws.receive_json()
        _send(ws, "recentThreads")
        _send(ws, "login", {"username": "a"})
        # recentThreads is dropped, so the next frame is the login reply
        assert ws.receive_json() == {"type": "loginResponse", "payload": {"status": "nouser"}}

    app, _ = _app(public_access="true")
    with TestClient(app) as client, client.websocket_connect("/ws") as ws:
        assert ws.receive_json()["payload"]["publicAccess"] is True
        _send(ws, "recentThreads")
        assert ws.receive_json() == {
            "type": "recentThreadsResponse",
            "payload": {"threads": [{"id": 1, "title": "Hello"}]},
        }


def test_malformed_frames_do_not_close_connection() -> None:
    app, _ = _app()
    with TestClient(app) as client, client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_text("not json")
        ws.send_text('{"payload": {}}')
        _send(ws, "noSuchCommand")
        _send(ws, "getGlobalUserSettings")
        assert ws.receive_json() == {"type": "globalUserSettings", "payload": {"minPasswordLength": 8}}


def test_sessions_are_isolated_between_connections() -> None:
    app, _ = _app()
    with TestClient(app) as client:
        with client.websocket_connect("/ws") as admin_ws:
            admin_ws.receive_json()
            _send(admin_ws, "login", {"username": "admin", "password": "secret"})
            admin_ws.receive_json()

            with client.websocket_connect("/ws") as other_ws:
                other_ws.receive_json()
                _send(other_ws, "logout")
                _send(other_ws, "login", {"username": "member", "password": "wrong"})
                assert other_ws.receive_json()["payload"] == {"status": "badpassword"}
