"""Journey search port."""

from typing import Protocol

from entur_mcp.domain.models.journey import SearchJourneyResult
from entur_mcp.domain.models.transport_mode import TransportModeFilter


class JourneySearch(Protocol):
    """Port for planning trips between two places."""

    async def search_journey(
        self,
        from_place_id: str,
        to_place_id: str,
        transport_mode: TransportModeFilter = "both",
        num_trip_patterns: int = 5,
        date_time: str | None = None,
        arrive_by: bool = False,
    ) -> SearchJourneyResult:
        """Search for trip options between two place identifiers."""
        ...
