"""Read commands over the Discussions collaborator."""

from __future__ import annotations

from ..config.protocol import CMD_RECENT_THREADS, CMD_LOAD_HOME_PAGE, CMD_LOAD_DISCUSSIONS
from ..handlers.router import CommandSpec, Precondition, CommandContext
from ..handlers.aggregator import ChainStep, run_chain


async def handle_load_home_page(ctx: CommandContext) -> None:
    """Reply with recent threads whatever status the collaborator reports."""
    _, threads = await ctx.discussions.get_recent_threads()
    await ctx.reply({"threads": threads})


async def handle_recent_threads(ctx: CommandContext) -> None:
    (threads,) = await run_chain(
        ctx.name,
        (ChainStep("getRecentThreads", ctx.discussions.get_recent_threads),),
    )
    await ctx.reply({"threads": threads})


async def handle_load_discussions(ctx: CommandContext) -> None:
    """Threads, then posts, then forums; any failure means no reply at all."""
    discussions = ctx.discussions
    threads, posts, forums = await run_chain(
        ctx.name,
        (
            ChainStep("getRecentThreads", discussions.get_recent_threads),
            ChainStep("getRecentPosts", discussions.get_recent_posts),
            ChainStep("getDiscussionForums", discussions.get_discussion_forums),
        ),
    )
    await ctx.reply({"threads": threads, "posts": posts, "forums": forums})


SPECS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name=CMD_LOAD_HOME_PAGE,
        handler=handle_load_home_page,
    ),
    CommandSpec(
        name=CMD_RECENT_THREADS,
        handler=handle_recent_threads,
        precondition=Precondition.READ_ACCESS,
    ),
    CommandSpec(
        name=CMD_LOAD_DISCUSSIONS,
        handler=handle_load_discussions,
        precondition=Precondition.READ_ACCESS,
    ),
)


__all__ = [
    "handle_load_home_page",
    "handle_recent_threads",
    "handle_load_discussions",
    "SPECS",
]
