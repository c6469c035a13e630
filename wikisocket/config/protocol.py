"""Command names, event names and status strings of the client protocol."""

from __future__ import annotations

# ----------------- Statuses -----------------

STATUS_SUCCESS = "success"
STATUS_NO_USER = "nouser"
STATUS_BAD_USERNAME = "badusername"
STATUS_BAD_CODE = "badcode"
STATUS_NO_PERMISSION = "nopermission"
STATUS_BAD_NAME = "badname"

# ----------------- Commands -----------------

CMD_LOGIN = "login"
CMD_LOGOUT = "logout"
CMD_CREATE_USER = "createUser"
CMD_RESEND_VERIFICATION_EMAIL = "resendVerificationEmail"
CMD_VERIFY_EMAIL = "verifyEmail"
CMD_GET_GLOBAL_USER_SETTINGS = "getGlobalUserSettings"
CMD_LOAD_HOME_PAGE = "loadHomePage"
CMD_RECENT_THREADS = "recentThreads"
CMD_LOAD_DISCUSSIONS = "loadDiscussions"
CMD_CREATE_DISCUSSION_FORUM = "createDiscussionForum"
CMD_SET_DISCUSSION_FORUM_TITLE = "setDiscussionForumTitle"
CMD_DELETE_DISCUSSION_FORUM = "deleteDiscussionForum"

# ----------------- Server-initiated events -----------------

EVENT_GLOBAL_SETTINGS = "globalSettings"
EVENT_GLOBAL_USER_SETTINGS = "globalUserSettings"

RESPONSE_SUFFIX = "Response"


def response_event(command: str) -> str:
    """Return the outbound event name answering ``command``."""
    return f"{command}{RESPONSE_SUFFIX}"


__all__ = [
    "STATUS_SUCCESS",
    "STATUS_NO_USER",
    "STATUS_BAD_USERNAME",
    "STATUS_BAD_CODE",
    "STATUS_NO_PERMISSION",
    "STATUS_BAD_NAME",
    "CMD_LOGIN",
    "CMD_LOGOUT",
    "CMD_CREATE_USER",
    "CMD_RESEND_VERIFICATION_EMAIL",
    "CMD_VERIFY_EMAIL",
    "CMD_GET_GLOBAL_USER_SETTINGS",
    "CMD_LOAD_HOME_PAGE",
    "CMD_RECENT_THREADS",
    "CMD_LOAD_DISCUSSIONS",
    "CMD_CREATE_DISCUSSION_FORUM",
    "CMD_SET_DISCUSSION_FORUM_TITLE",
    "CMD_DELETE_DISCUSSION_FORUM",
    "EVENT_GLOBAL_SETTINGS",
    "EVENT_GLOBAL_USER_SETTINGS",
    "RESPONSE_SUFFIX",
    "response_event",
]
