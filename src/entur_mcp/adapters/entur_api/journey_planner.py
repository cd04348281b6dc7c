"""Entur Journey Planner v3 adapter: trip search between two stops (GraphQL).

Uses NSR:StopPlace IDs as returned by the geocoder.
"""

import logging
from typing import TYPE_CHECKING, Any

from entur_mcp.adapters.entur_api.constants import (
    DEFAULT_ET_CLIENT_NAME,
    DEFAULT_TRIP_PATTERNS,
    JOURNEY_PLANNER_SERVICE,
    JOURNEY_PLANNER_URL,
    UNKNOWN_LEG_MODE,
)
from entur_mcp.adapters.entur_api.graphql_response import (
    GraphQLFailure,
    decode_graphql_response,
)
from entur_mcp.adapters.entur_api.http_client import EnturHttpClient
from entur_mcp.adapters.entur_api.trip_query_builder import build_trip_query
from entur_mcp.domain.errors import UpstreamLogicError
from entur_mcp.domain.models.journey import JourneyLeg, JourneyPattern, SearchJourneyResult
from entur_mcp.domain.models.transport_mode import TransportModeFilter
from entur_mcp.domain.ports.journey_search import JourneySearch

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _string_or_default(value: Any, default: str = "") -> str:
    return default if value is None else str(value)


def _optional_string(value: Any) -> str | None:
    return None if value is None else str(value)


def parse_leg(leg: Any) -> JourneyLeg:
    """Map one leg. Missing times become '', missing mode 'unknown'; line fields stay None."""
    leg = _as_dict(leg)
    line = _as_dict(leg.get("line"))
    from_place = _as_dict(leg.get("fromPlace"))
    to_place = _as_dict(leg.get("toPlace"))

    return JourneyLeg(
        expected_start_time=_string_or_default(leg.get("expectedStartTime")),
        expected_end_time=_string_or_default(leg.get("expectedEndTime")),
        mode=_string_or_default(leg.get("mode"), UNKNOWN_LEG_MODE),
        line_code=_optional_string(line.get("publicCode")),
        transport_mode=_optional_string(line.get("transportMode")),
        line_name=_optional_string(line.get("name")),
        from_place_name=_optional_string(from_place.get("name")),
        to_place_name=_optional_string(to_place.get("name")),
    )


def parse_trip_pattern(pattern: Any) -> JourneyPattern:
    """Map one trip pattern and its legs, keeping leg order."""
    pattern = _as_dict(pattern)
    duration = pattern.get("duration")

    return JourneyPattern(
        duration=int(duration) if duration is not None else 0,
        start_time=_string_or_default(pattern.get("startTime")),
        end_time=_string_or_default(pattern.get("endTime")),
        legs=tuple(parse_leg(leg) for leg in _as_list(pattern.get("legs"))),
    )


def extract_trip_patterns(data: dict[str, Any]) -> list[JourneyPattern]:
    """Map ``data.trip.tripPatterns``; an absent field gives an empty list."""
    trip = _as_dict(data.get("trip"))
    return [parse_trip_pattern(p) for p in _as_list(trip.get("tripPatterns"))]


class EnturJourneyPlanner(JourneySearch):
    """Adapter for the Entur Journey Planner v3 GraphQL endpoint."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        client_name: str = DEFAULT_ET_CLIENT_NAME,
        url: str = JOURNEY_PLANNER_URL,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            client_name: Value sent in the ET-Client-Name header.
            url: GraphQL endpoint URL.
        """
        self._http_client = EnturHttpClient(session=session, client_name=client_name)
        self._url = url

    async def search_journey(
        self,
        from_place_id: str,
        to_place_id: str,
        transport_mode: TransportModeFilter = "both",
        num_trip_patterns: int = DEFAULT_TRIP_PATTERNS,
        date_time: str | None = None,
        arrive_by: bool = False,
    ) -> SearchJourneyResult:
        """Search for trips between two places.

        Args:
            from_place_id: Origin place ID (e.g., "NSR:StopPlace:59872").
            to_place_id: Destination place ID.
            transport_mode: "train", "bus" or "both" (no restriction).
            num_trip_patterns: Number of trip options, clamped to [1, 20].
            date_time: Optional ISO 8601 date/time, e.g. "2026-02-17T08:00:00+01:00".
            arrive_by: If True and date_time is set, date_time is the latest arrival.

        Returns:
            SearchJourneyResult with trip patterns in upstream order.

        Raises:
            UpstreamHttpError: If the planner answers with a non-success status.
            UpstreamLogicError: If the planner reports GraphQL errors.
            ValueError: If transport_mode is not a known filter.
        """
        trip_query = build_trip_query(
            from_place_id,
            to_place_id,
            transport_mode=transport_mode,
            num_trip_patterns=num_trip_patterns,
            date_time=date_time,
            arrive_by=arrive_by,
        )
        body = await self._http_client.post_json(
            self._url, trip_query.to_payload(), JOURNEY_PLANNER_SERVICE
        )

        result = decode_graphql_response(body)
        if isinstance(result, GraphQLFailure):
            logger.warning(f"{JOURNEY_PLANNER_SERVICE} reported errors: {list(result.messages)}")
            raise UpstreamLogicError(JOURNEY_PLANNER_SERVICE, result.messages)

        trip_patterns = extract_trip_patterns(result.data)
        logger.debug(
            f"Journey planner returned {len(trip_patterns)} trip(s) "
            f"from {from_place_id} to {to_place_id}"
        )
        return SearchJourneyResult(
            from_place_id=from_place_id,
            to_place_id=to_place_id,
            trip_patterns=tuple(trip_patterns),
        )
