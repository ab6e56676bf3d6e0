"""
Records returned by The Blue Alliance API v3.

Only the keys the bot displays are declared; everything else in the payload
is ignored.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TBATeam(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    team_number: int
    nickname: str = ""
    city: Optional[str] = None
    state_prov: Optional[str] = None
    country: Optional[str] = None
    rookie_year: Optional[int] = None
    # TBA puts the sponsor list in the team's full "name"
    sponsors: Optional[str] = Field(None, alias="name")
    school_name: Optional[str] = None
    website: Optional[str] = None
    team_logo: Optional[str] = None


class TBAEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    key: str


# TBA answers `null` instead of `[]` for some empty lookups
EventList = TypeAdapter(Optional[List[TBAEvent]])
