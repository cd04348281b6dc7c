#!/usr/bin/env python3
"""Helper script to find an Entur stop ID and sample journeys from it."""

import asyncio
import sys
from pathlib import Path

import aiohttp

# Add src to path
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir / "src"))

from entur_mcp.adapters.entur_api import EnturGeocoder, EnturJourneyPlanner  # noqa: E402
from entur_mcp.adapters.formatters import TextFormatter  # noqa: E402


async def find_stop(name: str, destination: str | None = None) -> None:
    """Find a stop by name and, with a destination, show sample journeys."""
    formatter = TextFormatter()
    async with aiohttp.ClientSession() as session:
        geocoder = EnturGeocoder(session=session)
        stops = await geocoder.search_stops(name, size=5, transport_mode="both")
        print(formatter.format_stops(name, stops, "both"))
        if not stops or not destination:
            return

        targets = await geocoder.search_stops(destination, size=1, transport_mode="both")
        if not targets:
            print(f"\nDestination not found: {destination}")
            sys.exit(1)

        print("\nFetching sample journeys...")
        planner = EnturJourneyPlanner(session=session)
        result = await planner.search_journey(stops[0].id, targets[0].id, num_trip_patterns=3)
        print(formatter.format_journeys(result))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_stop.py <stop_name> [destination_name]")
        print('Example: python find_stop.py "Oslo S" "Bergen stasjon"')
        sys.exit(1)

    stop_name = sys.argv[1]
    destination_name = sys.argv[2] if len(sys.argv) > 2 else None

    asyncio.run(find_stop(stop_name, destination_name))
