"""Async contracts for the external services the command layer consumes.

The dispatch layer never reaches into storage directly. It talks to three
collaborators through the narrow protocols below, each call being a single
awaitable that resolves once:

Users:
    authenticate, create_user, resend_verification_email, verify_email,
    get_global_settings

Discussions:
    get_recent_threads, get_recent_posts, get_discussion_forums,
    create_discussion_forum, set_discussion_forum_title,
    delete_discussion_forum

Settings:
    get_setting

Any object with matching coroutine methods satisfies a contract; nothing
here needs to be subclassed.
"""

from __future__ import annotations

from typing import Any, Protocol, NamedTuple
from collections.abc import Mapping
from dataclasses import dataclass

from ..config.protocol import STATUS_SUCCESS


class ServiceResult(NamedTuple):
    """Status plus optional data returned by a Discussions call."""

    status: str
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS


@dataclass(frozen=True, slots=True)
class StatusResult:
    """Status-only reply from a Users call."""

    status: str

    def to_payload(self) -> dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True, slots=True)
class AuthResult:
    """Reply from Users.authenticate.

    Identity and role fields are only meaningful on success. Role flags are
    kept as reported; they are not coerced to bool.
    """

    status: str
    userid: str | None = None
    forum_admin: Any = None
    forum_moderator: Any = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status}
        if self.userid is not None:
            payload["userid"] = self.userid
        if self.forum_admin is not None:
            payload["forumAdmin"] = self.forum_admin
        if self.forum_moderator is not None:
            payload["forumModerator"] = self.forum_moderator
        return payload


class UsersService(Protocol):
    async def authenticate(self, username: Any, password: Any) -> AuthResult: ...

    async def create_user(self, username: Any, realname: Any, email: Any) -> StatusResult: ...

    async def resend_verification_email(self, username: Any) -> None: ...

    async def verify_email(self, username: Any, token: Any) -> StatusResult: ...

    async def get_global_settings(self) -> Mapping[str, Any]: ...


class DiscussionsService(Protocol):
    async def get_recent_threads(self) -> ServiceResult: ...

    async def get_recent_posts(self) -> ServiceResult: ...

    async def get_discussion_forums(self) -> ServiceResult: ...

    async def create_discussion_forum(self, title: str) -> ServiceResult: ...

    async def set_discussion_forum_title(self, forum_id: Any, title: str) -> ServiceResult: ...

    async def delete_discussion_forum(self, forum_id: Any) -> ServiceResult: ...


class SettingsService(Protocol):
    async def get_setting(self, key: str) -> str | None: ...


__all__ = [
    "ServiceResult",
    "StatusResult",
    "AuthResult",
    "UsersService",
    "DiscussionsService",
    "SettingsService",
]
