"""Process-wide settings snapshots loaded once at startup."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GlobalSettings:
    """Community settings pushed to every new connection."""

    community_name: str | None
    welcome_message: str | None
    public_access: bool

    def to_payload(self) -> dict[str, Any]:
        return {
            "communityName": self.community_name,
            "welcomeMessage": self.welcome_message,
            "publicAccess": self.public_access,
        }


@dataclass(frozen=True, slots=True)
class ServerSettings:
    """Server-side settings that are never sent to clients."""

    port: int
    email_address: str | None
    site_address: str | None


__all__ = ["GlobalSettings", "ServerSettings"]
