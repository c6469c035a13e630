"""Permission gate for session-scoped commands.

A pure predicate over the session snapshot. It never consults the Users
collaborator: role flags are whatever login copied into the session, so an
admin revoked elsewhere keeps admin rights on an open connection until it
logs out.
"""

from __future__ import annotations

import enum

from ..state.session import ConnectionSession


class Capability(str, enum.Enum):
    """What a command requires of the session invoking it."""

    NONE = "none"
    AUTHENTICATED = "authenticated"
    FORUM_ADMIN = "authenticated+forumAdmin"


def is_allowed(session: ConnectionSession, capability: Capability) -> bool:
    """Return True when ``session`` holds ``capability``.

    Role flags only count on an authenticated session, and the admin flag
    must be the ``True`` singleton.
    """
    if capability is Capability.NONE:
        return True
    if session.authenticated is not True:
        return False
    if capability is Capability.AUTHENTICATED:
        return True
    return session.is_forum_admin is True


__all__ = ["Capability", "is_allowed"]
