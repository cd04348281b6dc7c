"""Formatter turning stop and journey results into human-readable text."""

from datetime import datetime
from zoneinfo import ZoneInfo

from entur_mcp.domain.models.journey import JourneyLeg, JourneyPattern, SearchJourneyResult
from entur_mcp.domain.models.stop_result import StopResult

UNKNOWN_VALUE = "?"


class TextFormatter:
    """Formats search results as the text returned by the tools and the CLI."""

    def __init__(self, timezone: str = "Europe/Oslo") -> None:
        """Initialize the formatter.

        Args:
            timezone: IANA timezone used for clock times (e.g., "Europe/Oslo").
        """
        self._zone = ZoneInfo(timezone)

    def format_clock_time(self, value: str) -> str:
        """Format an ISO 8601 timestamp as HH:MM in the configured timezone, or '?'."""
        if not value:
            return UNKNOWN_VALUE
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return UNKNOWN_VALUE
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self._zone)
        return parsed.astimezone(self._zone).strftime("%H:%M")

    @staticmethod
    def format_duration(seconds: int) -> str:
        """Format a duration in seconds as rounded minutes, or '?' when zero."""
        if not seconds:
            return UNKNOWN_VALUE
        return f"{round(seconds / 60)} min"

    @staticmethod
    def format_stop(stop: StopResult) -> str:
        """Format one stop as '- name → id (layer) [train, bus]'."""
        modes = f" [{', '.join(stop.transport_types)}]" if stop.transport_types else ""
        return f"- {stop.name} → {stop.id} ({stop.layer}){modes}"

    def format_stops(
        self, name: str, stops: list[StopResult], transport_mode: str | None = None
    ) -> str:
        """Format a stop search result."""
        if not stops:
            filter_note = f" with transport={transport_mode}" if transport_mode else ""
            return f'No stops found for "{name}"{filter_note}.'

        lines = [self.format_stop(stop) for stop in stops]
        filter_note = f" (filter: {transport_mode})" if transport_mode else ""
        return f'Stops matching "{name}"{filter_note}:\n' + "\n".join(lines)

    @staticmethod
    def format_leg(leg: JourneyLeg) -> str:
        """Format one leg as '  • mode line: from → to'."""
        line_info = f" {leg.line_code}" if leg.line_code else ""
        places = " → ".join(p for p in (leg.from_place_name, leg.to_place_name) if p)
        return f"  • {leg.mode}{line_info}{f': {places}' if places else ''}"

    def format_pattern(self, index: int, pattern: JourneyPattern) -> list[str]:
        """Format one trip option with its legs, 1-based index."""
        start = self.format_clock_time(pattern.start_time)
        end = self.format_clock_time(pattern.end_time)
        duration = self.format_duration(pattern.duration)
        lines = [f"Option {index}: {start} → {end} ({duration})"]
        lines.extend(self.format_leg(leg) for leg in pattern.legs)
        return lines

    def format_journeys(
        self,
        result: SearchJourneyResult,
        transport_mode: str | None = None,
        date_time: str | None = None,
        arrive_by: bool = False,
    ) -> str:
        """Format a journey search result."""
        if not result.trip_patterns:
            mode_note = f" (mode: {transport_mode})" if transport_mode else ""
            return (
                f"No journeys found from {result.from_place_id} "
                f"to {result.to_place_id}{mode_note}."
            )

        lines: list[str] = []
        for index, pattern in enumerate(result.trip_patterns, 1):
            lines.extend(self.format_pattern(index, pattern))
            lines.append("")

        mode_note = f" ({transport_mode} only)" if transport_mode else ""
        time_note = f" {'arrive by' if arrive_by else 'depart at'} {date_time}" if date_time else ""
        header = f"Journeys {result.from_place_id} → {result.to_place_id}{mode_note}{time_note}:"
        return f"{header}\n\n" + "\n".join(lines).rstrip()
