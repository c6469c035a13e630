"""Authentication and account commands.

login, createUser, resendVerificationEmail, verifyEmail and logout. Only
login touches the session; the account commands delegate to the Users
collaborator and forward its reply.
"""

from __future__ import annotations

import logging

from ..config.protocol import (
    CMD_LOGIN,
    CMD_LOGOUT,
    STATUS_NO_USER,
    STATUS_BAD_CODE,
    CMD_CREATE_USER,
    CMD_VERIFY_EMAIL,
    STATUS_BAD_USERNAME,
    CMD_RESEND_VERIFICATION_EMAIL,
)
from ..handlers.router import CommandSpec, Precondition, CommandContext
from ..handlers.lifecycle import logout_session

logger = logging.getLogger(__name__)


async def handle_login(ctx: CommandContext) -> None:
    """Authenticate and, on success, upgrade the session.

    The collaborator's reply is always forwarded, success or not.
    """
    data = ctx.data
    username = data["username"]
    result = await ctx.users.authenticate(username, data["password"])
    if result.ok:
        user_id = "" if result.userid is None else str(result.userid)
        ctx.session.sign_in(
            user_id,
            forum_admin=result.forum_admin,
            forum_moderator=result.forum_moderator,
        )
        logger.info("login succeeded username=%r user_id=%s", username, user_id)
    else:
        logger.info("login failed username=%r status=%s", username, result.status)
    await ctx.reply(result.to_payload())


async def handle_create_user(ctx: CommandContext) -> None:
    data = ctx.data
    result = await ctx.users.create_user(data["username"], data["realname"], data["email"])
    await ctx.reply(result.to_payload())


async def handle_resend_verification_email(ctx: CommandContext) -> None:
    # No reply on any branch
    await ctx.users.resend_verification_email(ctx.data["username"])


async def handle_verify_email(ctx: CommandContext) -> None:
    data = ctx.data
    result = await ctx.users.verify_email(data["username"], data["token"])
    await ctx.reply(result.to_payload())


async def handle_logout(ctx: CommandContext) -> None:
    logout_session(ctx.session)


SPECS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name=CMD_LOGIN,
        handler=handle_login,
        fields={"username": None, "password": None},
        precondition=Precondition.ANONYMOUS,
        shape_status=STATUS_NO_USER,
    ),
    CommandSpec(
        name=CMD_CREATE_USER,
        handler=handle_create_user,
        fields={"username": None, "realname": None, "email": None},
        precondition=Precondition.ANONYMOUS,
        shape_status=STATUS_BAD_USERNAME,
        state_status=STATUS_BAD_USERNAME,
    ),
    CommandSpec(
        name=CMD_RESEND_VERIFICATION_EMAIL,
        handler=handle_resend_verification_email,
        fields={"username": None},
        precondition=Precondition.ANONYMOUS,
    ),
    CommandSpec(
        name=CMD_VERIFY_EMAIL,
        handler=handle_verify_email,
        fields={"username": None, "token": None},
        precondition=Precondition.ANONYMOUS,
        shape_status=STATUS_BAD_CODE,
        state_status=STATUS_BAD_CODE,
    ),
    CommandSpec(
        name=CMD_LOGOUT,
        handler=handle_logout,
    ),
)


__all__ = [
    "handle_login",
    "handle_create_user",
    "handle_resend_verification_email",
    "handle_verify_email",
    "handle_logout",
    "SPECS",
]
