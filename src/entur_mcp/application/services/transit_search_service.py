"""Transit search service."""

import logging

from entur_mcp.domain.models.journey import SearchJourneyResult
from entur_mcp.domain.models.stop_result import StopResult
from entur_mcp.domain.models.transport_mode import TransportModeFilter
from entur_mcp.domain.ports.journey_search import JourneySearch
from entur_mcp.domain.ports.stop_search import StopSearch
from entur_mcp.domain.ports.transit_search import TransitSearch

logger = logging.getLogger(__name__)

DEFAULT_STOP_RESULTS = 10
DEFAULT_TRIP_PATTERNS = 5


class TransitSearchService(TransitSearch):
    """Stop and journey searches as offered to tool callers."""

    def __init__(
        self,
        stop_search: StopSearch,
        journey_search: JourneySearch,
        language: str = "en",
    ) -> None:
        """Initialize with the two search ports and the geocoder label language."""
        self._stop_search = stop_search
        self._journey_search = journey_search
        self._language = language

    async def search_stops(
        self,
        name: str,
        size: int | None = None,
        transport_mode: TransportModeFilter | None = None,
    ) -> list[StopResult]:
        """Find stops by name, optionally filtered by train, bus or both."""
        stops = await self._stop_search.search_stops(
            name,
            lang=self._language,
            size=DEFAULT_STOP_RESULTS if size is None else size,
            transport_mode=transport_mode,
        )
        logger.debug(f"Found {len(stops)} stop(s) for '{name}' (filter: {transport_mode})")
        return stops

    async def search_journey(
        self,
        from_place_id: str,
        to_place_id: str,
        transport_mode: TransportModeFilter | None = None,
        num_trip_patterns: int | None = None,
        date_time: str | None = None,
        arrive_by: bool | None = None,
    ) -> SearchJourneyResult:
        """Find trip options between two place IDs.

        Omitted arguments fall back to all modes, five trips, now and depart-at.
        """
        result = await self._journey_search.search_journey(
            from_place_id,
            to_place_id,
            transport_mode=transport_mode or "both",
            num_trip_patterns=DEFAULT_TRIP_PATTERNS
            if num_trip_patterns is None
            else num_trip_patterns,
            date_time=date_time,
            arrive_by=bool(arrive_by),
        )
        logger.debug(
            f"Found {len(result.trip_patterns)} trip(s) from {from_place_id} to {to_place_id}"
        )
        return result
