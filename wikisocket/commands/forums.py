"""Forum management commands (forum admins only).

Each command performs its mutation and, on success, replies with the full
forum list re-read after the change:

    {"status": "success", "forums": [...]}

A failed mutation replies with the collaborator's status alone and the
list is not re-read.
"""

from __future__ import annotations

from ..config.protocol import (
    STATUS_BAD_NAME,
    CMD_CREATE_DISCUSSION_FORUM,
    CMD_DELETE_DISCUSSION_FORUM,
    CMD_SET_DISCUSSION_FORUM_TITLE,
)
from ..errors import ValidationError
from ..handlers.router import CommandSpec, Precondition, CommandContext
from ..handlers.aggregator import ChainStep, mutate_and_refetch
from ..handlers.permissions import Capability


def clean_title(ctx: CommandContext) -> str:
    """Return the trimmed title or raise ValidationError when it is blank."""
    title = ctx.data["title"].strip()
    if not title:
        raise ValidationError(ctx.name, STATUS_BAD_NAME, "title is empty")
    return title


def _forums_step(ctx: CommandContext) -> ChainStep:
    return ChainStep("getDiscussionForums", ctx.discussions.get_discussion_forums)


async def handle_create_discussion_forum(ctx: CommandContext) -> None:
    title = clean_title(ctx)
    reply = await mutate_and_refetch(
        ctx.name,
        ChainStep("createDiscussionForum", lambda: ctx.discussions.create_discussion_forum(title)),
        _forums_step(ctx),
        result_key="forums",
    )
    await ctx.reply(reply)


async def handle_set_discussion_forum_title(ctx: CommandContext) -> None:
    title = clean_title(ctx)
    forum_id = ctx.data["id"]
    reply = await mutate_and_refetch(
        ctx.name,
        ChainStep(
            "setDiscussionForumTitle",
            lambda: ctx.discussions.set_discussion_forum_title(forum_id, title),
        ),
        _forums_step(ctx),
        result_key="forums",
    )
    await ctx.reply(reply)


async def handle_delete_discussion_forum(ctx: CommandContext) -> None:
    forum_id = ctx.data["id"]
    reply = await mutate_and_refetch(
        ctx.name,
        ChainStep("deleteDiscussionForum", lambda: ctx.discussions.delete_discussion_forum(forum_id)),
        _forums_step(ctx),
        result_key="forums",
    )
    await ctx.reply(reply)


def _admin_spec(name: str, handler, fields) -> CommandSpec:
    # Shape and login failures drop silently; only the role check answers.
    return CommandSpec(
        name=name,
        handler=handler,
        fields=fields,
        precondition=Precondition.AUTHENTICATED,
        capability=Capability.FORUM_ADMIN,
        forward_collaborator_status=True,
    )


SPECS: tuple[CommandSpec, ...] = (
    _admin_spec(
        CMD_CREATE_DISCUSSION_FORUM,
        handle_create_discussion_forum,
        {"title": str},
    ),
    _admin_spec(
        CMD_SET_DISCUSSION_FORUM_TITLE,
        handle_set_discussion_forum_title,
        {"title": str, "id": None},
    ),
    _admin_spec(
        CMD_DELETE_DISCUSSION_FORUM,
        handle_delete_discussion_forum,
        {"id": None},
    ),
)


__all__ = [
    "clean_title",
    "handle_create_discussion_forum",
    "handle_set_discussion_forum_title",
    "handle_delete_discussion_forum",
    "SPECS",
]
