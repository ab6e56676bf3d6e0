import asyncio
import logging
from enum import Enum
from typing import Any, List, Optional, Sequence

import discord

from tbabot.bot.commands import COMMANDS
from tbabot.bot.handlers import CommandHandlers
from tbabot.bot.helpers import handle_interaction
from tbabot.config import Settings
from tbabot.models.commands import CommandDefinition, RegisteredCommand
from tbabot.tba.client import TBAClient

logger = logging.getLogger(__name__)


class LifecycleError(Exception):
    """Unrecoverable error while starting or stopping the bot."""


class SessionOpenError(LifecycleError):
    pass


class CommandRegistrationError(LifecycleError):
    pass


class CommandDeregistrationError(LifecycleError):
    pass


class LifecycleState(Enum):
    CREATED = "created"
    OPENED = "opened"
    COMMANDS_REGISTERED = "commands_registered"
    RUNNING = "running"
    COMMANDS_DEREGISTERED = "commands_deregistered"
    CLOSED = "closed"


class TBABot(discord.Client):
    """discord.Client that forwards slash command interactions to the handlers."""

    def __init__(self, handlers: CommandHandlers, **options: Any):
        options.setdefault("intents", discord.Intents.default())
        super().__init__(**options)
        self.handlers = handlers

    async def on_ready(self):
        logger.info("Logged in as: %s", self.user)

    async def on_interaction(self, interaction: discord.Interaction):
        await handle_interaction(interaction, self.handlers)


class CommandRegistrar:
    """
    Registers global slash commands one by one and remembers what it created,
    so that only those commands are deleted again.
    """

    def __init__(self, http: Any):
        self.http = http
        self.registered: List[RegisteredCommand] = []

    async def register_all(
        self, application_id: int, definitions: Sequence[CommandDefinition]
    ) -> List[RegisteredCommand]:
        for definition in definitions:
            try:
                data = await self.http.upsert_global_command(application_id, definition.to_payload())
            except discord.HTTPException as e:
                raise CommandRegistrationError(f"Cannot create '{definition.name}' command: {e}") from e
            command = RegisteredCommand.model_validate(data)
            logger.info("Registered command /%s (id=%s)", command.name, command.id)
            self.registered.append(command)
        return list(self.registered)

    async def remove_all(self, application_id: int) -> None:
        while self.registered:
            command = self.registered[0]
            try:
                await self.http.delete_global_command(application_id, command.id)
            except discord.HTTPException as e:
                raise CommandDeregistrationError(f"Cannot delete '{command.name}' command: {e}") from e
            logger.info("Removed command /%s (id=%s)", command.name, command.id)
            self.registered.pop(0)


class BotLifecycle:
    """
    Open the session, register commands, run until stopped, optionally remove
    the commands again, close.

    Every step runs once; any failure ends the run with a LifecycleError.
    """

    def __init__(
        self,
        client: discord.Client,
        registrar: Optional[CommandRegistrar] = None,
        remove_commands: bool = False,
        definitions: Sequence[CommandDefinition] = COMMANDS,
    ):
        self.client = client
        self.registrar = registrar or CommandRegistrar(client.http)
        self.remove_commands = remove_commands
        self.definitions = definitions
        self.state = LifecycleState.CREATED

    def _transition(self, state: LifecycleState) -> None:
        logger.debug("Lifecycle %s -> %s", self.state.value, state.value)
        self.state = state

    async def run(self, token: str, stop: asyncio.Event) -> None:
        try:
            await self._open(token)
            application_id = self.client.application_id

            logger.info("Adding commands...")
            await self.registrar.register_all(application_id, self.definitions)
            self._transition(LifecycleState.COMMANDS_REGISTERED)

            await self._serve(stop)

            if self.remove_commands:
                logger.info("Removing commands...")
                await self.registrar.remove_all(application_id)
                self._transition(LifecycleState.COMMANDS_DEREGISTERED)
        finally:
            await self.client.close()
            self._transition(LifecycleState.CLOSED)

        logger.info("Gracefully shutting down.")

    async def _open(self, token: str) -> None:
        try:
            await self.client.login(token)
        except (discord.LoginFailure, discord.HTTPException) as e:
            raise SessionOpenError(f"Cannot open the session: {e}") from e
        self._transition(LifecycleState.OPENED)

    async def _serve(self, stop: asyncio.Event) -> None:
        gateway = asyncio.create_task(self.client.connect(), name="discord-gateway")
        stopped = asyncio.create_task(stop.wait(), name="stop-signal")
        self._transition(LifecycleState.RUNNING)
        logger.info("Press Ctrl+C to exit")

        done, _ = await asyncio.wait({gateway, stopped}, return_when=asyncio.FIRST_COMPLETED)
        if gateway in done:
            stopped.cancel()
            # connect() only returns on its own when the gateway gave up
            exc = gateway.exception()
            if exc is not None:
                raise LifecycleError(f"Gateway connection failed: {exc}") from exc
            return

        gateway.cancel()
        try:
            await gateway
        except asyncio.CancelledError:
            pass


def create_bot(settings: Settings) -> BotLifecycle:
    """Wire the TBA client, handlers, Discord client and lifecycle together."""
    tba = TBAClient(
        auth_key=settings.tba_auth_key,
        base_url=settings.tba_base_url,
        timeout=settings.tba_timeout,
    )
    client = TBABot(CommandHandlers(tba))
    return BotLifecycle(client, remove_commands=settings.remove_commands)
