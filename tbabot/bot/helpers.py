"""
Glue between discord.py interactions and the command handlers.
"""
import logging

import discord

from tbabot.bot.commands import parse_command
from tbabot.bot.handlers import CommandHandlers, Reply
from tbabot.tba.formatters import format_error

logger = logging.getLogger(__name__)


async def defer_reply(interaction: discord.Interaction) -> bool:
    """Acknowledge an interaction now and answer it later with a follow-up."""
    try:
        await interaction.response.defer()
    except discord.HTTPException:
        logger.exception("Error deferring interaction %s", interaction.id)
        return False
    return True


async def send_reply(interaction: discord.Interaction, reply: Reply, deferred: bool = False) -> bool:
    """
    Answer an interaction.

    Args:
        interaction: The interaction being answered
        reply: Text content and/or embed to send
        deferred: The interaction was already acknowledged with defer_reply

    Returns:
        True if Discord accepted the response, False otherwise
    """
    kwargs = {}
    if reply.content is not None:
        kwargs["content"] = reply.content
    if reply.display is not None:
        kwargs["embed"] = reply.display.to_embed()
    try:
        if deferred:
            await interaction.followup.send(**kwargs)
        else:
            await interaction.response.send_message(**kwargs)
    except discord.HTTPException:
        logger.exception("Error responding to interaction %s", interaction.id)
        return False
    return True


async def handle_interaction(interaction: discord.Interaction, handlers: CommandHandlers) -> bool:
    """Parse, dispatch and answer one interaction. Returns whether a reply was sent."""
    if interaction.type != discord.InteractionType.application_command:
        return False

    try:
        command = parse_command(interaction.data)
    except (TypeError, ValueError):
        logger.exception("Malformed interaction data: %s", interaction.data)
        return await send_reply(interaction, Reply(display=format_error("Invalid command options")))
    if command is None:
        return False

    logger.info("Handling %s for user %s", command, interaction.user)
    deferred = handlers.is_remote(command)
    if deferred and not await defer_reply(interaction):
        return False
    reply = await handlers.handle(command)
    return await send_reply(interaction, reply, deferred=deferred)
