from types import SimpleNamespace
from typing import List
from unittest.mock import AsyncMock

import discord
import pytest

from tbabot.models.tba import TBAEvent, TBATeam

TEAM_254 = {
    "key": "frc254",
    "team_number": 254,
    "nickname": "The Cheesy Poofs",
    "name": "NASA Ames Research Center/Google&Bellarmine College Preparatory",
    "city": "San Jose",
    "state_prov": "California",
    "country": "USA",
    "rookie_year": 1999,
    "school_name": "Bellarmine College Preparatory",
    "website": "http://www.team254.com",
}

EVENTS_254 = [
    {"key": "2024casj", "name": "Silicon Valley Regional", "year": 2024},
    {"key": "2024cmptx", "name": "FIRST Championship", "year": 2024},
]


class FakeTBA:
    """Stands in for TBAClient; set `error` to make every call fail."""

    def __init__(self, team=None, events=None, error=None):
        self.team = team or TBATeam.model_validate(TEAM_254)
        self.events = events if events is not None else [TBAEvent.model_validate(e) for e in EVENTS_254]
        self.error = error
        self.calls: List[tuple] = []

    async def fetch_team(self, team_number):
        self.calls.append(("team", team_number))
        if self.error:
            raise self.error
        return self.team

    async def fetch_events_for_team(self, team_number, year):
        self.calls.append(("events", team_number, year))
        if self.error:
            raise self.error
        return self.events


def make_interaction(data, interaction_type=discord.InteractionType.application_command):
    return SimpleNamespace(
        id=1234,
        type=interaction_type,
        data=data,
        user="tester#0001",
        response=SimpleNamespace(send_message=AsyncMock(), defer=AsyncMock()),
        followup=SimpleNamespace(send=AsyncMock()),
    )


def http_exception(status=500, message="boom"):
    return discord.HTTPException(SimpleNamespace(status=status, reason="Error"), message)


@pytest.fixture
def fake_tba():
    return FakeTBA()
