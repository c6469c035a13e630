"""Command handlers for the wiki client protocol.

auth.py:
    login, createUser, resendVerificationEmail, verifyEmail, logout

settings.py:
    getGlobalUserSettings

discussions.py:
    loadHomePage, recentThreads, loadDiscussions

forums.py:
    createDiscussionForum, setDiscussionForumTitle, deleteDiscussionForum
"""

from __future__ import annotations

from ..handlers.router import CommandRouter
from . import auth, forums, settings, discussions


def build_command_router() -> CommandRouter:
    """Return a router with every protocol command registered."""
    return CommandRouter((*auth.SPECS, *settings.SPECS, *discussions.SPECS, *forums.SPECS))


__all__ = ["build_command_router"]
