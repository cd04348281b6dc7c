"""Journey domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class JourneyLeg:
    """Represents one uninterrupted segment of a trip.

    A leg without line information is a walking or transfer segment.
    """

    expected_start_time: str  # ISO 8601 with offset, empty when upstream omits it
    expected_end_time: str
    mode: str  # Generic travel mode (e.g., "foot", "rail"), "unknown" when omitted
    line_code: str | None = None  # Public line code (e.g., "F6")
    transport_mode: str | None = None  # Upstream mode of the line (e.g., "rail", "bus")
    line_name: str | None = None
    from_place_name: str | None = None
    to_place_name: str | None = None

    @property
    def is_walking(self) -> bool:
        """True when the leg carries no line information."""
        return self.line_code is None and self.transport_mode is None and self.line_name is None


@dataclass(frozen=True)
class JourneyPattern:
    """Represents one complete trip option."""

    duration: int  # Seconds
    start_time: str
    end_time: str
    legs: tuple[JourneyLeg, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SearchJourneyResult:
    """Trip options between two places, in the order ranked by upstream."""

    from_place_id: str
    to_place_id: str
    trip_patterns: tuple[JourneyPattern, ...] = field(default_factory=tuple)
