"""Tests for the text formatter."""

import pytest

from entur_mcp.adapters.formatters import TextFormatter
from entur_mcp.domain.models import JourneyLeg, JourneyPattern, SearchJourneyResult, StopResult


@pytest.fixture
def formatter() -> TextFormatter:
    return TextFormatter("Europe/Oslo")


class TestStops:
    """Tests for stop search output."""

    def test_when_no_stops_then_not_found_message(self, formatter: TextFormatter) -> None:
        """Given no stops, when formatting, then a not-found line is returned."""
        assert formatter.format_stops("Nowhere", []) == 'No stops found for "Nowhere".'

    def test_when_no_stops_with_filter_then_filter_is_mentioned(
        self, formatter: TextFormatter
    ) -> None:
        """Given no stops and a filter, when formatting, then the filter is named."""
        assert (
            formatter.format_stops("Nowhere", [], "bus")
            == 'No stops found for "Nowhere" with transport=bus.'
        )

    def test_when_stops_then_one_line_per_stop(self, formatter: TextFormatter) -> None:
        """Given tagged and untagged stops, when formatting, then tags only where present."""
        stops = [
            StopResult("Oslo S, Oslo", "NSR:StopPlace:59872", "venue", ("train", "bus")),
            StopResult("Oslogata 1, Oslo", "", "address"),
        ]

        text = formatter.format_stops("Oslo", stops, "both")

        assert text == (
            'Stops matching "Oslo" (filter: both):\n'
            "- Oslo S, Oslo → NSR:StopPlace:59872 (venue) [train, bus]\n"
            "- Oslogata 1, Oslo →  (address)"
        )


class TestClockAndDuration:
    """Tests for time and duration rendering."""

    def test_when_timestamp_has_offset_then_converted_to_zone(
        self, formatter: TextFormatter
    ) -> None:
        """Given a UTC timestamp, when formatting, then Oslo winter time is shown."""
        assert formatter.format_clock_time("2026-02-17T07:00:00Z") == "08:00"

    @pytest.mark.parametrize("value", ["", "not a time"])
    def test_when_timestamp_missing_or_invalid_then_question_mark(
        self, formatter: TextFormatter, value: str
    ) -> None:
        """Given an empty or invalid timestamp, when formatting, then '?' is shown."""
        assert formatter.format_clock_time(value) == "?"

    @pytest.mark.parametrize(
        ("seconds", "expected"), [(0, "?"), (600, "10 min"), (25200, "420 min")]
    )
    def test_duration_in_rounded_minutes(self, seconds: int, expected: str) -> None:
        """Given seconds, when formatting, then rounded minutes or '?' for zero."""
        assert TextFormatter.format_duration(seconds) == expected


class TestJourneys:
    """Tests for journey search output."""

    def test_when_no_patterns_then_not_found_message(self, formatter: TextFormatter) -> None:
        """Given no trip patterns, when formatting with a mode, then the mode is named."""
        result = SearchJourneyResult("A", "B")

        assert (
            formatter.format_journeys(result, transport_mode="train")
            == "No journeys found from A to B (mode: train)."
        )

    def test_when_patterns_then_options_with_legs(self, formatter: TextFormatter) -> None:
        """Given two options, when formatting, then each option lists its legs."""
        walk = JourneyLeg(
            "2026-02-17T08:01:00+01:00",
            "2026-02-17T08:05:00+01:00",
            "foot",
            from_place_name="Oslo S",
            to_place_name="Spor 3",
        )
        train = JourneyLeg(
            "2026-02-17T08:05:00+01:00",
            "2026-02-17T15:01:00+01:00",
            "rail",
            line_code="F4",
            transport_mode="rail",
            from_place_name="Oslo S",
            to_place_name="Bergen stasjon",
        )
        result = SearchJourneyResult(
            "NSR:StopPlace:59872",
            "NSR:StopPlace:59983",
            (
                JourneyPattern(
                    25200, "2026-02-17T08:01:00+01:00", "2026-02-17T15:01:00+01:00", (walk, train)
                ),
                JourneyPattern(0, "", "", (JourneyLeg("", "", "unknown"),)),
            ),
        )

        text = formatter.format_journeys(
            result,
            transport_mode="train",
            date_time="2026-02-17T08:00:00+01:00",
            arrive_by=False,
        )

        assert text == (
            "Journeys NSR:StopPlace:59872 → NSR:StopPlace:59983 (train only) "
            "depart at 2026-02-17T08:00:00+01:00:\n"
            "\n"
            "Option 1: 08:01 → 15:01 (420 min)\n"
            "  • foot: Oslo S → Spor 3\n"
            "  • rail F4: Oslo S → Bergen stasjon\n"
            "\n"
            "Option 2: ? → ? (?)\n"
            "  • unknown"
        )

    def test_when_arrive_by_then_header_says_arrive_by(self, formatter: TextFormatter) -> None:
        """Given arrive_by with a time, when formatting, then the header says 'arrive by'."""
        result = SearchJourneyResult("A", "B", (JourneyPattern(60, "", ""),))

        text = formatter.format_journeys(
            result, date_time="2026-02-17T10:00:00+01:00", arrive_by=True
        )

        assert text.startswith("Journeys A → B arrive by 2026-02-17T10:00:00+01:00:\n\n")
        assert text.endswith("Option 1: ? → ? (1 min)")
