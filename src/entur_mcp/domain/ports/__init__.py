"""Ports (interfaces) for the ports-and-adapters architecture."""

from entur_mcp.domain.ports.journey_search import JourneySearch
from entur_mcp.domain.ports.stop_search import StopSearch
from entur_mcp.domain.ports.transit_search import TransitSearch

__all__ = ["JourneySearch", "StopSearch", "TransitSearch"]
