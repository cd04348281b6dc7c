"""Stop search port."""

from typing import Protocol

from entur_mcp.domain.models.stop_result import StopResult
from entur_mcp.domain.models.transport_mode import TransportModeFilter


class StopSearch(Protocol):
    """Port for resolving free text to stop candidates."""

    async def search_stops(
        self,
        text: str,
        lang: str = "en",
        size: int = 10,
        transport_mode: TransportModeFilter | None = None,
    ) -> list[StopResult]:
        """Search for stops matching free text."""
        ...
