"""Domain models for Entur stop and journey searches."""

from entur_mcp.domain.models.error_details import ErrorDetails
from entur_mcp.domain.models.journey import JourneyLeg, JourneyPattern, SearchJourneyResult
from entur_mcp.domain.models.stop_result import StopResult
from entur_mcp.domain.models.transport_mode import (
    TRANSPORT_MODE_FILTERS,
    TransportModeFilter,
    TransportType,
    validate_transport_mode,
)

__all__ = [
    "TRANSPORT_MODE_FILTERS",
    "ErrorDetails",
    "JourneyLeg",
    "JourneyPattern",
    "SearchJourneyResult",
    "StopResult",
    "TransportModeFilter",
    "TransportType",
    "validate_transport_mode",
]
