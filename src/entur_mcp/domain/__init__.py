"""Domain layer - models, errors and ports."""

from entur_mcp.domain.errors import EnturApiError, UpstreamHttpError, UpstreamLogicError
from entur_mcp.domain.models import (
    JourneyLeg,
    JourneyPattern,
    SearchJourneyResult,
    StopResult,
)
from entur_mcp.domain.ports import JourneySearch, StopSearch

__all__ = [
    "EnturApiError",
    "JourneyLeg",
    "JourneyPattern",
    "JourneySearch",
    "SearchJourneyResult",
    "StopResult",
    "StopSearch",
    "UpstreamHttpError",
    "UpstreamLogicError",
]
