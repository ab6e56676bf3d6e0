from typing import List, Optional

from tbabot.models.display import Display, DisplayField
from tbabot.models.tba import TBAEvent, TBATeam
from tbabot.tba.client import team_key
from tbabot.tba.errors import FetchError

TBA_SITE_URL = "https://www.thebluealliance.com"

MISSING = "N/A"

NO_EVENTS = Display(
    title="No Events Found",
    description="No events found for the specified team this year.",
)


def _value(value: Optional[object]) -> str:
    # Discord rejects empty field values
    if value is None or value == "":
        return MISSING
    return str(value)


def format_location(team: TBATeam) -> str:
    parts = [team.city, team.state_prov, team.country]
    return ", ".join(_value(part) for part in parts)


def format_team(team: TBATeam, year: int, site_url: str = TBA_SITE_URL) -> Display:
    """
    Build the profile card for a team.

    Args:
        team: Decoded team record
        year: Season used for the avatar thumbnail
        site_url: Public TBA site, used for links

    Returns:
        Display with the team's details, avatar and profile link
    """
    number = team.team_number
    return Display(
        title=f"Team {number} ({team.nickname})",
        fields=[
            DisplayField(name="Team", value=_value(team.nickname)),
            DisplayField(name="Location", value=format_location(team)),
            DisplayField(name="Rookie Year", value=_value(team.rookie_year)),
            DisplayField(name="Sponsors", value=_value(team.sponsors)),
            DisplayField(name="School", value=_value(team.school_name)),
            DisplayField(name="Website", value=_value(team.website)),
        ],
        thumbnail_url=f"{site_url}/avatar/{year}/{team_key(str(number))}.png",
        url=f"{site_url}/team/{number}",
    )


def format_events(team_number: str, events: List[TBAEvent], site_url: str = TBA_SITE_URL) -> Display:
    """One markdown link per event, or the fixed "No Events Found" card."""
    if not events:
        return NO_EVENTS.model_copy()

    lines = [f"[{event.name}]({site_url}/event/{event.key})" for event in events]
    return Display(
        title=f"Events for Team {team_number}",
        description="\n".join(lines),
    )


def format_error(description: str) -> Display:
    return Display(title="Error", description=description)


def format_fetch_error(error: FetchError) -> Display:
    return format_error(error.description)
