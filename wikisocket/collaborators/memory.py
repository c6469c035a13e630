"""In-memory Users and Discussions collaborators.

These back the default application and the integration tests. They keep
everything in process memory and implement only what the command layer
needs from the real services; persistence, credential hashing and email
delivery belong to the services that replace them in production.
"""

from __future__ import annotations

import copy
import logging
import secrets
from typing import Any
from collections.abc import Callable, Mapping
from dataclasses import field, dataclass

from ..config.protocol import STATUS_SUCCESS, STATUS_NO_USER, STATUS_BAD_CODE, STATUS_BAD_USERNAME
from .base import AuthResult, StatusResult, ServiceResult

logger = logging.getLogger(__name__)

STATUS_BAD_PASSWORD = "badpassword"
STATUS_UNVERIFIED = "unverified"
STATUS_BAD_EMAIL = "bademail"
STATUS_NO_FORUM = "noforum"

TokenFactory = Callable[[], str]


def _default_token() -> str:
    return secrets.token_urlsafe(16)


@dataclass
class _UserRecord:
    userid: str
    username: str
    realname: str
    email: str
    password: str | None = None
    verified: bool = False
    token: str | None = None
    forum_admin: bool = False
    forum_moderator: bool = False


class InMemoryUsers:
    """Users collaborator keeping accounts in a dict keyed by username.

    Attributes:
        sent_verifications: (username, token) pairs that would have been
            mailed; inspected by tests instead of a mail transport.
    """

    def __init__(
        self,
        *,
        global_settings: Mapping[str, Any] | None = None,
        token_factory: TokenFactory | None = None,
    ) -> None:
        self._users: dict[str, _UserRecord] = {}
        self._global_settings = dict(global_settings or {})
        self._token_factory = token_factory or _default_token
        self._next_id = 1
        self.sent_verifications: list[tuple[str, str]] = []

    def add_user(
        self,
        username: str,
        password: str,
        *,
        realname: str = "",
        email: str = "",
        forum_admin: bool = False,
        forum_moderator: bool = False,
        verified: bool = True,
    ) -> str:
        """Seed a ready-to-use account and return its user id."""
        record = self._new_record(username, realname, email)
        record.password = password
        record.verified = verified
        record.forum_admin = forum_admin
        record.forum_moderator = forum_moderator
        return record.userid

    async def authenticate(self, username: Any, password: Any) -> AuthResult:
        record = self._users.get(username) if isinstance(username, str) else None
        if record is None:
            return AuthResult(status=STATUS_NO_USER)
        if not record.verified:
            return AuthResult(status=STATUS_UNVERIFIED)
        if (
            record.password is None
            or not isinstance(password, str)
            or not secrets.compare_digest(record.password, password)
        ):
            return AuthResult(status=STATUS_BAD_PASSWORD)
        return AuthResult(
            status=STATUS_SUCCESS,
            userid=record.userid,
            forum_admin=record.forum_admin,
            forum_moderator=record.forum_moderator,
        )

    async def create_user(self, username: Any, realname: Any, email: Any) -> StatusResult:
        if not isinstance(username, str) or not username.strip() or username in self._users:
            return StatusResult(status=STATUS_BAD_USERNAME)
        if not isinstance(email, str) or "@" not in email:
            return StatusResult(status=STATUS_BAD_EMAIL)
        record = self._new_record(username, str(realname or ""), email)
        self._issue_token(record)
        return StatusResult(status=STATUS_SUCCESS)

    async def resend_verification_email(self, username: Any) -> None:
        record = self._users.get(username) if isinstance(username, str) else None
        if record is None or record.verified:
            logger.debug("resend verification skipped for username=%r", username)
            return
        self._issue_token(record)

    async def verify_email(self, username: Any, token: Any) -> StatusResult:
        record = self._users.get(username) if isinstance(username, str) else None
        if record is None or record.verified or record.token is None:
            return StatusResult(status=STATUS_BAD_CODE)
        if not isinstance(token, str) or not secrets.compare_digest(record.token, token):
            return StatusResult(status=STATUS_BAD_CODE)
        record.verified = True
        record.token = None
        return StatusResult(status=STATUS_SUCCESS)

    async def get_global_settings(self) -> Mapping[str, Any]:
        return dict(self._global_settings)

    def _new_record(self, username: str, realname: str, email: str) -> _UserRecord:
        record = _UserRecord(
            userid=str(self._next_id),
            username=username,
            realname=realname,
            email=email,
        )
        self._next_id += 1
        self._users[username] = record
        return record

    def _issue_token(self, record: _UserRecord) -> None:
        record.token = self._token_factory()
        self.sent_verifications.append((record.username, record.token))


@dataclass
class _DiscussionsStore:
    forums: dict[int, dict[str, Any]] = field(default_factory=dict)
    threads: list[dict[str, Any]] = field(default_factory=list)
    posts: list[dict[str, Any]] = field(default_factory=list)
    next_forum_id: int = 1


def _resolve_forum_id(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None


class InMemoryDiscussions:
    """Discussions collaborator keeping forums, threads and posts in memory.

    Recent lists are newest-first and capped at ``recent_limit`` entries.
    Returned data is deep-copied so callers cannot mutate the store.
    """

    def __init__(self, *, recent_limit: int = 20) -> None:
        self._store = _DiscussionsStore()
        self._recent_limit = max(1, recent_limit)

    def add_thread(self, thread: Mapping[str, Any]) -> None:
        self._store.threads.append(dict(thread))

    def add_post(self, post: Mapping[str, Any]) -> None:
        self._store.posts.append(dict(post))

    async def get_recent_threads(self) -> ServiceResult:
        return ServiceResult(STATUS_SUCCESS, self._recent(self._store.threads))

    async def get_recent_posts(self) -> ServiceResult:
        return ServiceResult(STATUS_SUCCESS, self._recent(self._store.posts))

    async def get_discussion_forums(self) -> ServiceResult:
        forums = [copy.deepcopy(forum) for _, forum in sorted(self._store.forums.items())]
        return ServiceResult(STATUS_SUCCESS, forums)

    async def create_discussion_forum(self, title: str) -> ServiceResult:
        forum_id = self._store.next_forum_id
        self._store.next_forum_id += 1
        self._store.forums[forum_id] = {"id": forum_id, "title": title}
        return ServiceResult(STATUS_SUCCESS, forum_id)

    async def set_discussion_forum_title(self, forum_id: Any, title: str) -> ServiceResult:
        forum = self._store.forums.get(_resolve_forum_id(forum_id))
        if forum is None:
            return ServiceResult(STATUS_NO_FORUM)
        forum["title"] = title
        return ServiceResult(STATUS_SUCCESS, forum["id"])

    async def delete_discussion_forum(self, forum_id: Any) -> ServiceResult:
        resolved = _resolve_forum_id(forum_id)
        if resolved not in self._store.forums:
            return ServiceResult(STATUS_NO_FORUM)
        del self._store.forums[resolved]
        return ServiceResult(STATUS_SUCCESS, resolved)

    def _recent(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [copy.deepcopy(item) for item in reversed(items[-self._recent_limit:])]


__all__ = [
    "InMemoryUsers",
    "InMemoryDiscussions",
    "STATUS_BAD_PASSWORD",
    "STATUS_UNVERIFIED",
    "STATUS_BAD_EMAIL",
    "STATUS_NO_FORUM",
]
