"""Application services."""

from entur_mcp.application.services.transit_search_service import TransitSearchService

__all__ = ["TransitSearchService"]
