import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Dict, Optional, Type
from urllib.parse import quote_plus

from tbabot.bot.commands import (
    Command,
    HttpCat,
    Lmgtfy,
    Ping,
    TbaEventsFor,
    TbaTeam,
    TbaUnknown,
)
from tbabot.models.display import Display
from tbabot.tba.client import TBAClient
from tbabot.tba.errors import FetchError
from tbabot.tba.formatters import format_error, format_events, format_fetch_error, format_team

logger = logging.getLogger(__name__)

# Commands that call TBA; answered after deferring so the lookup can outlast
# Discord's initial response window
REMOTE_COMMANDS = (TbaTeam, TbaEventsFor)

LMGTFY_URL = "https://letmegooglethat.com/?q="
HTTP_CAT_URL = "https://http.cat/{code}.jpg"


@dataclass(frozen=True)
class Reply:
    """The one reply sent for an interaction: plain text or an embed."""

    content: Optional[str] = None
    display: Optional[Display] = None


def current_year() -> int:
    return datetime.now().year


class CommandHandlers:
    """Maps every command variant to the coroutine that answers it."""

    def __init__(self, tba: TBAClient, year: Callable[[], int] = current_year):
        self.tba = tba
        self.year = year
        self.handlers: Dict[Type, Callable[..., Awaitable[Reply]]] = {
            Ping: self.ping,
            Lmgtfy: self.lmgtfy,
            HttpCat: self.httpcat,
            TbaTeam: self.tba_team,
            TbaEventsFor: self.tba_events_for,
            TbaUnknown: self.tba_unknown,
        }

    def is_remote(self, command: Command) -> bool:
        return isinstance(command, REMOTE_COMMANDS)

    async def handle(self, command: Command) -> Reply:
        handler = self.handlers.get(type(command))
        if handler is None:
            raise TypeError(f"no handler for {type(command).__name__}")
        return await handler(command)

    async def ping(self, command: Ping) -> Reply:
        return Reply(content="Pong!")

    async def lmgtfy(self, command: Lmgtfy) -> Reply:
        return Reply(content=LMGTFY_URL + quote_plus(command.search))

    async def httpcat(self, command: HttpCat) -> Reply:
        return Reply(content=HTTP_CAT_URL.format(code=command.status_code))

    async def tba_team(self, command: TbaTeam) -> Reply:
        try:
            team = await self.tba.fetch_team(command.team_number)
        except FetchError as e:
            return Reply(display=format_fetch_error(e))
        return Reply(display=format_team(team, self.year()))

    async def tba_events_for(self, command: TbaEventsFor) -> Reply:
        try:
            events = await self.tba.fetch_events_for_team(command.team_number, self.year())
        except FetchError as e:
            return Reply(display=format_fetch_error(e))
        return Reply(display=format_events(command.team_number, events))

    async def tba_unknown(self, command: TbaUnknown) -> Reply:
        logger.warning("Unknown tba sub-command %r", command.subcommand)
        return Reply(display=format_error(f"Unknown sub-command: {command.subcommand}"))
