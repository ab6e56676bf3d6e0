import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from tbabot.config import DEFAULT_TBA_BASE_URL
from tbabot.models.tba import EventList, TBAEvent, TBATeam
from tbabot.tba.errors import (
    BodyReadError,
    DecodeError,
    FetchTransportError,
    RequestBuildError,
    StatusCodeError,
)

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-TBA-Auth-Key"
TEAM_KEY_PREFIX = "frc"


def team_key(team_number: str) -> str:
    """TBA key for an FRC team number, e.g. "254" -> "frc254"."""
    return TEAM_KEY_PREFIX + team_number


class TBAClient:
    """Read-only client for The Blue Alliance API v3."""

    def __init__(
        self,
        auth_key: str,
        base_url: str = DEFAULT_TBA_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.auth_key = auth_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def fetch_team(self, team_number: str) -> TBATeam:
        """
        Get a team's profile.

        Args:
            team_number: Team number as typed by the user, without the "frc" prefix

        Raises:
            FetchError: on any failure, see tbabot.tba.errors
        """
        body = await self._get(f"/team/{self._team_path(team_number)}")
        try:
            team = TBATeam.model_validate_json(body)
        except ValidationError as e:
            logger.error("Error decoding TBA team response: %s", e)
            raise DecodeError(str(e)) from e
        logger.info("TBA team fetched: %s (%s)", team.team_number, team.nickname)
        return team

    async def fetch_events_for_team(self, team_number: str, year: int) -> List[TBAEvent]:
        """
        Get the events a team is registered for in a season.

        Args:
            team_number: Team number without the "frc" prefix
            year: Season year

        Returns:
            Events in the order TBA lists them, possibly empty
        """
        body = await self._get(f"/team/{self._team_path(team_number)}/events/{year}")
        try:
            events = EventList.validate_json(body) or []
        except ValidationError as e:
            logger.error("Error decoding TBA events response: %s", e)
            raise DecodeError(str(e)) from e
        logger.info("TBA events fetched for team %s in %s: %d", team_number, year, len(events))
        return events

    @staticmethod
    def _team_path(team_number: str) -> str:
        return quote(team_key(team_number.strip()), safe="")

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    async def _get(self, path: str) -> bytes:
        url = self.base_url + path
        headers = {AUTH_HEADER: self.auth_key}

        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            try:
                request = client.build_request("GET", url, headers=headers)
            except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError) as e:
                logger.error("Error creating TBA request for %s: %s", url, e)
                raise RequestBuildError(str(e)) from e

            try:
                resp = await client.send(request, stream=True)
            except httpx.UnsupportedProtocol as e:
                logger.error("Error creating TBA request for %s: %s", url, e)
                raise RequestBuildError(str(e)) from e
            except httpx.HTTPError as e:
                logger.exception("Error fetching TBA data from %s", url)
                raise FetchTransportError(str(e)) from e

            try:
                body = await resp.aread()
            except httpx.HTTPError as e:
                logger.exception("Error reading TBA response body from %s", url)
                raise BodyReadError(str(e)) from e
            finally:
                await resp.aclose()

        if resp.status_code != httpx.codes.OK:
            text = body.decode(errors="replace")
            logger.error("HTTP error %s when fetching %s: %s", resp.status_code, url, text)
            raise StatusCodeError(resp.status_code, text)

        return body
