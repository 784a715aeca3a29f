"""Advent calendar GraphQL client."""

from __future__ import annotations

import json
import logging
import pathlib
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from adventfeed.ingest.models import CalendarSnapshot, GraphQLEnvelope, StoreProfile

logger = logging.getLogger(__name__)

OPERATION_NAME = "GET_ADVENTCALENDAR"
QUERY_PATH = pathlib.Path(__file__).with_name("advent_calendar.graphql")
QUERY = QUERY_PATH.read_text()
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36"
)

_ENVELOPES = TypeAdapter(list[GraphQLEnvelope])


class UpstreamError(RuntimeError):
    pass


class RequestBuildError(UpstreamError):
    pass


class NetworkError(UpstreamError):
    pass


class UpstreamStatusError(UpstreamError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(UpstreamError):
    pass


class EmptyPayloadError(UpstreamError):
    pass


def build_payload() -> list[dict[str, Any]]:
    return [{"operationName": OPERATION_NAME, "variables": {}, "query": QUERY}]


def build_headers(profile: StoreProfile, user_agent: str) -> dict[str, str]:
    return {
        "Accept": "*/*",
        "Accept-Language": "en-US,en;q=0.9",
        "Cache-Control": "no-cache",
        "Content-Type": "application/json",
        "Origin": profile.base_url,
        "Pragma": "no-cache",
        "User-Agent": user_agent,
        # routing headers the upstream gateway requires
        "x-dg-graphql-client-name": "isomorph",
        "x-dg-language": "de-CH",
        "x-dg-portal": profile.portal_id,
        "x-dg-routename": "/advent-calendar",
        "x-dg-routeowner": "stellapolaris",
        "x-dg-team": "stellapolaris",
    }


class AdventCalendarClient:
    def __init__(
        self,
        profile: StoreProfile,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        session: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.profile = profile
        self.user_agent = user_agent
        self._session = session or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._session.aclose()

    async def fetch_calendar(self) -> CalendarSnapshot:
        request = self._build_request()
        try:
            response = await self._session.send(request)
        except httpx.HTTPError as exc:
            raise NetworkError(f"failed to fetch data: {exc}") from exc
        if not response.is_success:
            raise UpstreamStatusError(response.status_code, response.text)
        envelopes = self._decode(response)
        if not envelopes:
            raise EmptyPayloadError("empty response from API")
        envelope = envelopes[0]
        if envelope.errors:
            logger.warning(
                "GraphQL errors from %s: %s",
                self.profile.name,
                "; ".join(error.message for error in envelope.errors),
            )
        calendar = envelope.data.advent_calendar
        logger.info("Fetched %s products from %s", len(calendar.products), self.profile.name)
        return calendar

    def _build_request(self) -> httpx.Request:
        try:
            body = json.dumps(build_payload())
            return self._session.build_request(
                "POST",
                self.profile.api_url,
                content=body,
                headers=build_headers(self.profile, self.user_agent),
            )
        except (TypeError, ValueError, httpx.InvalidURL) as exc:
            raise RequestBuildError(f"failed to create request: {exc}") from exc

    def _decode(self, response: httpx.Response) -> list[GraphQLEnvelope]:
        try:
            return _ENVELOPES.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode response: {exc}") from exc


async def fetch_calendar(profile: StoreProfile, user_agent: str = DEFAULT_USER_AGENT) -> CalendarSnapshot:
    client = AdventCalendarClient(profile, user_agent=user_agent)
    try:
        return await client.fetch_calendar()
    finally:
        await client.close()
