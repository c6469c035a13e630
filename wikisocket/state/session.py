"""Per-connection session state.

ConnectionSession holds the authentication snapshot of one WebSocket
connection. It is created unauthenticated when the connection is accepted,
upgraded by a successful login, reset by logout, and dropped with the
connection. It is never shared between connections and never persisted.

Role flags are stored exactly as the Users collaborator reported them at
login time; the permission gate compares them by identity with True, so a
truthy non-bool value does not grant a role.
"""

from __future__ import annotations

import uuid
from typing import Any
from dataclasses import field, dataclass


@dataclass
class ConnectionSession:
    """Authentication snapshot for one connection.

    Attributes:
        connection_id: Opaque identifier used for log correlation only.
        authenticated: True once a login succeeded on this connection.
        user_id: Identity reported by the Users collaborator; empty when
            unauthenticated.
        is_forum_admin: Forum admin flag as reported at login.
        is_forum_moderator: Forum moderator flag as reported at login.
    """

    connection_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    authenticated: bool = False
    user_id: str = ""
    is_forum_admin: Any = False
    is_forum_moderator: Any = False

    def sign_in(self, user_id: str, *, forum_admin: Any, forum_moderator: Any) -> None:
        """Upgrade to authenticated and copy identity and role flags."""
        self.authenticated = True
        self.user_id = user_id
        self.is_forum_admin = forum_admin
        self.is_forum_moderator = forum_moderator

    def reset(self) -> None:
        """Return every authentication field to its initial value."""
        self.authenticated = False
        self.user_id = ""
        self.is_forum_admin = False
        self.is_forum_moderator = False


__all__ = ["ConnectionSession"]
