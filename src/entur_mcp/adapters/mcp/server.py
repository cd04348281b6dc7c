"""MCP server exposing the Entur stop and journey searches as tools."""

import logging
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from entur_mcp.adapters.config.app_config import AppConfig
from entur_mcp.adapters.formatters.text_formatter import TextFormatter
from entur_mcp.domain.models.transport_mode import TransportModeFilter
from entur_mcp.domain.ports.transit_search import TransitSearch

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Entur journey planner and geocoder tools (Norwegian public transport). "
    "Use search_stops to find NSR:StopPlace IDs, then search_journey to plan trips."
)

SEARCH_STOPS_DESCRIPTION = (
    "Search for public transport stops by name and get NSR:StopPlace IDs. "
    "Optionally filter by train or bus. Use these IDs with search_journey. "
    "Covers Norwegian stops (Entur Geocoder)."
)

SEARCH_JOURNEY_DESCRIPTION = (
    "Search for public transport journeys between two stops. Use NSR:StopPlace IDs "
    "(from search_stops). Returns trip options with duration, times and legs "
    "(train/bus/walk). Optionally filter by train or bus only."
)


class EnturToolHandlers:
    """Runs a search and renders the result as tool output text."""

    def __init__(self, transit_search: TransitSearch, formatter: TextFormatter) -> None:
        """Initialize with the search service and a text formatter."""
        self._transit_search = transit_search
        self._formatter = formatter

    async def search_stops(
        self,
        name: str,
        size: int = 10,
        transport_mode: TransportModeFilter | None = None,
    ) -> str:
        """Search stops and format them as a bullet list."""
        try:
            stops = await self._transit_search.search_stops(
                name, size=size, transport_mode=transport_mode
            )
        except Exception as e:
            logger.error(f"search_stops failed for '{name}': {e}")
            raise
        return self._formatter.format_stops(name, stops, transport_mode)

    async def search_journey(
        self,
        from_place_id: str,
        to_place_id: str,
        transport_mode: TransportModeFilter | None = None,
        num_trip_patterns: int = 5,
        date_time: str | None = None,
        arrive_by: bool = False,
    ) -> str:
        """Search journeys and format each trip option with its legs."""
        try:
            result = await self._transit_search.search_journey(
                from_place_id,
                to_place_id,
                transport_mode=transport_mode,
                num_trip_patterns=num_trip_patterns,
                date_time=date_time,
                arrive_by=arrive_by,
            )
        except Exception as e:
            logger.error(f"search_journey failed from {from_place_id} to {to_place_id}: {e}")
            raise
        return self._formatter.format_journeys(
            result, transport_mode=transport_mode, date_time=date_time, arrive_by=arrive_by
        )


def register_tools(mcp: FastMCP, handlers: EnturToolHandlers) -> None:
    """Register search_stops and search_journey on an MCP server.

    Argument names are camelCase because they are part of the tool schema.
    """

    @mcp.tool(name="search_stops", description=SEARCH_STOPS_DESCRIPTION)
    async def search_stops(
        name: Annotated[
            str,
            Field(description="Stop or place name to search for (e.g. 'Oslo S', 'Bergen stasjon')"),
        ],
        size: Annotated[
            int, Field(ge=1, le=100, description="Max number of results (1-100)")
        ] = 10,
        transportMode: Annotated[  # noqa: N803
            Literal["train", "bus", "both"] | None,
            Field(
                description="Filter by transport type: 'train' (rail only), 'bus' (bus/coach "
                "only), 'both' (stops that have train or bus). Omit for all results."
            ),
        ] = None,
    ) -> str:
        return await handlers.search_stops(name, size=size, transport_mode=transportMode)

    @mcp.tool(name="search_journey", description=SEARCH_JOURNEY_DESCRIPTION)
    async def search_journey(
        fromPlaceId: Annotated[  # noqa: N803
            str,
            Field(
                description="Origin stop ID, e.g. NSR:StopPlace:59872 (Oslo S). "
                "Use search_stops to find IDs."
            ),
        ],
        toPlaceId: Annotated[  # noqa: N803
            str,
            Field(
                description="Destination stop ID, e.g. NSR:StopPlace:59983 (Bergen). "
                "Use search_stops to find IDs."
            ),
        ],
        transportMode: Annotated[  # noqa: N803
            Literal["train", "bus", "both"] | None,
            Field(
                description="Filter trips by mode: 'train' (rail only), 'bus' (bus only), "
                "'both' (default, all modes)."
            ),
        ] = None,
        numTripPatterns: Annotated[  # noqa: N803
            int,
            Field(ge=1, le=20, description="Number of trip options to return (1-20, default 5)."),
        ] = 5,
        dateTime: Annotated[  # noqa: N803
            str | None,
            Field(
                description="ISO 8601 date/time for when to travel "
                "(e.g. 2026-02-17T08:00:00+01:00). Omit for 'now'. Supports future dates."
            ),
        ] = None,
        arriveBy: Annotated[  # noqa: N803
            bool,
            Field(
                description="If true and dateTime is set, dateTime is latest arrival; "
                "otherwise earliest departure."
            ),
        ] = False,
    ) -> str:
        return await handlers.search_journey(
            fromPlaceId,
            toPlaceId,
            transport_mode=transportMode,
            num_trip_patterns=numTripPatterns,
            date_time=dateTime,
            arrive_by=arriveBy,
        )


def create_mcp_server(config: AppConfig, transit_search: TransitSearch) -> FastMCP:
    """Create the MCP server with both tools registered.

    Args:
        config: Application configuration (server name, host, port, timezone).
        transit_search: Service running the searches.

    Returns:
        Configured FastMCP instance, not yet running.
    """
    mcp = FastMCP(
        config.server_name,
        instructions=SERVER_INSTRUCTIONS,
        host=config.host,
        port=config.port,
    )
    handlers = EnturToolHandlers(transit_search, TextFormatter(config.timezone))
    register_tools(mcp, handlers)
    return mcp
