"""Transit search service port."""

from typing import Protocol

from entur_mcp.domain.models.journey import SearchJourneyResult
from entur_mcp.domain.models.stop_result import StopResult
from entur_mcp.domain.models.transport_mode import TransportModeFilter


class TransitSearch(Protocol):
    """Port for the stop and journey searches offered to tool callers."""

    async def search_stops(
        self,
        name: str,
        size: int | None = None,
        transport_mode: TransportModeFilter | None = None,
    ) -> list[StopResult]:
        """Find stops by name.

        Args:
            name: Stop or place name (e.g., "Oslo S", "Bergen stasjon").
            size: Maximum number of results (1-100), default 10.
            transport_mode: "train", "bus", "both", or None for all results.

        Returns:
            Matching stops in upstream order.
        """
        ...

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

        Args:
            from_place_id: Origin ID (e.g., "NSR:StopPlace:59872").
            to_place_id: Destination ID.
            transport_mode: "train", "bus" or "both" (default).
            num_trip_patterns: Number of trip options (1-20), default 5.
            date_time: Optional ISO 8601 date/time, default now.
            arrive_by: If True, date_time is the latest arrival.

        Returns:
            Trip options as ranked by upstream.
        """
        ...
