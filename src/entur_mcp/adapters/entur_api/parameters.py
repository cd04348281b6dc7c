"""Bounds applied to caller-supplied request sizes."""

from entur_mcp.adapters.entur_api.constants import (
    MAX_STOP_RESULTS,
    MAX_TRIP_PATTERNS,
    MIN_STOP_RESULTS,
    MIN_TRIP_PATTERNS,
)


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into the inclusive range [lower, upper]."""
    return min(upper, max(lower, value))


def clamp_stop_results(size: int) -> int:
    """Clamp a geocoder result size into [1, 100]."""
    return clamp(size, MIN_STOP_RESULTS, MAX_STOP_RESULTS)


def clamp_trip_patterns(num_trip_patterns: int) -> int:
    """Clamp a requested trip pattern count into [1, 20]."""
    return clamp(num_trip_patterns, MIN_TRIP_PATTERNS, MAX_TRIP_PATTERNS)
