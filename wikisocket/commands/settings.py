"""Settings commands."""

from __future__ import annotations

from ..config.protocol import CMD_GET_GLOBAL_USER_SETTINGS, EVENT_GLOBAL_USER_SETTINGS
from ..handlers.router import CommandSpec, CommandContext


async def handle_get_global_user_settings(ctx: CommandContext) -> None:
    settings = await ctx.users.get_global_settings()
    await ctx.reply(settings)


SPECS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name=CMD_GET_GLOBAL_USER_SETTINGS,
        handler=handle_get_global_user_settings,
        reply_event=EVENT_GLOBAL_USER_SETTINGS,
    ),
)


__all__ = ["handle_get_global_user_settings", "SPECS"]
