"""Command line helper for looking up Entur stops and journeys."""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

from entur_mcp.adapters.config import AppConfig
from entur_mcp.adapters.formatters import TextFormatter
from entur_mcp.bootstrap import create_session, create_transit_search_service
from entur_mcp.domain.models import TRANSPORT_MODE_FILTERS, SearchJourneyResult, StopResult


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def stops_to_json(stops: list[StopResult]) -> str:
    """Serialize stop results as a JSON array."""
    return _to_json([asdict(stop) for stop in stops])


def journey_to_json(result: SearchJourneyResult) -> str:
    """Serialize a journey result as a JSON object."""
    return _to_json(asdict(result))


async def run_stops(args: argparse.Namespace, config: AppConfig) -> str:
    """Run the stops command and return the text to print."""
    if args.lang:
        config.default_language = args.lang

    async with create_session(config) as session:
        service = create_transit_search_service(config, session)
        stops = await service.search_stops(args.name, size=args.size, transport_mode=args.mode)

    if args.json:
        return stops_to_json(stops)
    return TextFormatter(config.timezone).format_stops(args.name, stops, args.mode)


async def run_journey(args: argparse.Namespace, config: AppConfig) -> str:
    """Run the journey command and return the text to print."""
    async with create_session(config) as session:
        service = create_transit_search_service(config, session)
        result = await service.search_journey(
            args.from_place_id,
            args.to_place_id,
            transport_mode=args.mode,
            num_trip_patterns=args.num,
            date_time=args.date_time,
            arrive_by=args.arrive_by,
        )

    if args.json:
        return journey_to_json(result)
    return TextFormatter(config.timezone).format_journeys(
        result, transport_mode=args.mode, date_time=args.date_time, arrive_by=args.arrive_by
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the stops and journey commands."""
    parser = argparse.ArgumentParser(
        description="Entur stop and journey lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stops
  entur-tools stops "Oslo S"

  # Only train stations, as JSON
  entur-tools stops "Bergen" --mode train --json

  # Plan a journey
  entur-tools journey NSR:StopPlace:59872 NSR:StopPlace:59983

  # Arrive by a given time
  entur-tools journey NSR:StopPlace:59872 NSR:StopPlace:59983 \\
      --date-time 2026-02-17T08:00:00+01:00 --arrive-by
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Stops command
    stops_parser = subparsers.add_parser("stops", help="Search for stops by name")
    stops_parser.add_argument("name", help="Stop or place name to search for")
    stops_parser.add_argument("--size", type=int, default=10, help="Max number of results (1-100)")
    stops_parser.add_argument(
        "--mode", choices=TRANSPORT_MODE_FILTERS, help="Filter by transport type"
    )
    stops_parser.add_argument("--lang", help="Language of labels (default from config)")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Journey command
    journey_parser = subparsers.add_parser("journey", help="Search journeys between two stops")
    journey_parser.add_argument("from_place_id", help="Origin stop ID (e.g., NSR:StopPlace:59872)")
    journey_parser.add_argument("to_place_id", help="Destination stop ID")
    journey_parser.add_argument(
        "--mode", choices=TRANSPORT_MODE_FILTERS, help="Restrict to train or bus"
    )
    journey_parser.add_argument(
        "--num", type=int, default=5, help="Number of trip options (1-20)"
    )
    journey_parser.add_argument("--date-time", help="ISO 8601 date/time, default now")
    journey_parser.add_argument(
        "--arrive-by", action="store_true", help="Treat --date-time as latest arrival"
    )
    journey_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()

    try:
        if args.command == "stops":
            output = await run_stops(args, config)
        else:
            output = await run_journey(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
