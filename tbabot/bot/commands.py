"""
Slash commands exposed by the bot.

COMMANDS is what gets registered with Discord. Incoming interaction data is
turned into one of the command variants below by parse_command; the
handlers in tbabot.bot.handlers act on the variants only.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from tbabot.models.commands import CommandDefinition, CommandOption, OptionType

logger = logging.getLogger(__name__)

_TEAM_NUMBER = CommandOption(
    name="teamnumber",
    description="The number of the team",
    type=OptionType.STRING,
    required=True,
)

COMMANDS: List[CommandDefinition] = [
    CommandDefinition(name="ping", description="Ping the bot"),
    CommandDefinition(
        name="lmgtfy",
        description="Generate a LMGTFY link",
        options=(
            CommandOption(name="search", description="The search", type=OptionType.STRING, required=True),
        ),
    ),
    CommandDefinition(
        name="tba",
        description="Fetch data from The Blue Alliance",
        options=(
            CommandOption(
                name="eventsfor",
                description="get data about an event",
                type=OptionType.SUB_COMMAND,
                options=(_TEAM_NUMBER,),
            ),
            CommandOption(
                name="team",
                description="get data about a team",
                type=OptionType.SUB_COMMAND,
                options=(_TEAM_NUMBER,),
            ),
        ),
    ),
    CommandDefinition(
        name="httpcat",
        description="cat image for a HTTP status code",
        options=(
            CommandOption(
                name="statuscode",
                description="The HTTP status code",
                type=OptionType.INTEGER,
                required=True,
            ),
        ),
    ),
]


@dataclass(frozen=True)
class Ping:
    pass


@dataclass(frozen=True)
class Lmgtfy:
    search: str


@dataclass(frozen=True)
class HttpCat:
    status_code: int


@dataclass(frozen=True)
class TbaTeam:
    team_number: str


@dataclass(frozen=True)
class TbaEventsFor:
    team_number: str


@dataclass(frozen=True)
class TbaUnknown:
    subcommand: str


Command = Union[Ping, Lmgtfy, HttpCat, TbaTeam, TbaEventsFor, TbaUnknown]

COMMAND_TYPES = (Ping, Lmgtfy, HttpCat, TbaTeam, TbaEventsFor, TbaUnknown)


def _options(data: Mapping[str, Any]) -> List[Dict[str, Any]]:
    return list(data.get("options") or [])


def _first_value(data: Mapping[str, Any]) -> Any:
    options = _options(data)
    if not options:
        raise ValueError(f"command {data.get('name')!r} has no option values")
    return options[0].get("value")


def _parse_tba(data: Mapping[str, Any]) -> Command:
    options = _options(data)
    if not options:
        return TbaUnknown(subcommand="")
    sub = options[0]
    name = sub.get("name", "")
    if name == "team":
        return TbaTeam(team_number=str(_first_value(sub)))
    if name == "eventsfor":
        return TbaEventsFor(team_number=str(_first_value(sub)))
    return TbaUnknown(subcommand=name)


def parse_command(data: Optional[Mapping[str, Any]]) -> Optional[Command]:
    """
    Turn application command interaction data into a command variant.

    Args:
        data: The interaction's `data` object ({"name": ..., "options": [...]})

    Returns:
        The command, or None when the name is not one of ours
    """
    if not data:
        return None
    name = data.get("name")
    if name == "ping":
        return Ping()
    if name == "lmgtfy":
        return Lmgtfy(search=str(_first_value(data)))
    if name == "httpcat":
        return HttpCat(status_code=int(_first_value(data)))
    if name == "tba":
        return _parse_tba(data)
    logger.debug("Ignoring unknown command %r", name)
    return None
