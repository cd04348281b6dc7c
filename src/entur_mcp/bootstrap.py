"""Composition of the Entur adapters into the transit search service."""

import aiohttp

from entur_mcp.adapters.config import AppConfig
from entur_mcp.adapters.entur_api import EnturGeocoder, EnturJourneyPlanner
from entur_mcp.application.services import TransitSearchService


def create_session(config: AppConfig) -> aiohttp.ClientSession:
    """Create the HTTP session shared by both clients, with the configured timeout."""
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=config.api_timeout_seconds))


def create_transit_search_service(
    config: AppConfig, session: aiohttp.ClientSession
) -> TransitSearchService:
    """Wire the geocoder and journey planner into the search service."""
    geocoder = EnturGeocoder(
        session=session, client_name=config.et_client_name, url=config.geocoder_url
    )
    journey_planner = EnturJourneyPlanner(
        session=session, client_name=config.et_client_name, url=config.journey_planner_url
    )
    return TransitSearchService(geocoder, journey_planner, language=config.default_language)
