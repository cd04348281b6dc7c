"""Entur API adapters (Geocoder and Journey Planner v3)."""

from entur_mcp.adapters.entur_api.geocoder import EnturGeocoder
from entur_mcp.adapters.entur_api.journey_planner import EnturJourneyPlanner

__all__ = ["EnturGeocoder", "EnturJourneyPlanner"]
