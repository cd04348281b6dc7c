"""Builder for the Journey Planner v3 trip query.

The query text depends on two independent toggles: the mode restriction
(train or bus narrows to one upstream transport mode, both adds nothing) and
the time parameterization (only present when a date/time is given; without it
upstream plans from now, departing).
"""

from dataclasses import dataclass, field
from typing import Any

from entur_mcp.adapters.entur_api.constants import DEFAULT_TRIP_PATTERNS, JOURNEY_MODE_MAP
from entur_mcp.adapters.entur_api.parameters import clamp_trip_patterns
from entur_mcp.domain.models.transport_mode import TransportModeFilter, validate_transport_mode

_TRIP_QUERY_TEMPLATE = """
query Trip($from: String!, $to: String!, $num: Int!{variable_definitions}) {{
  trip(from: {{ place: $from }}, to: {{ place: $to }}, numTripPatterns: $num{trip_arguments}) {{
    tripPatterns {{
      duration
      startTime
      endTime
      legs {{
        expectedStartTime
        expectedEndTime
        mode
        line {{
          publicCode
          transportMode
          name
        }}
        fromPlace {{ name }}
        toPlace {{ name }}
      }}
    }}
  }}
}}
"""

_DATE_TIME_VARIABLES = ", $dateTime: DateTime, $arriveBy: Boolean"
_DATE_TIME_ARGUMENTS = ", dateTime: $dateTime, arriveBy: $arriveBy"


@dataclass(frozen=True)
class TripQuery:
    """GraphQL query text with its bound variables."""

    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON request body."""
        return {"query": self.query, "variables": dict(self.variables)}


def modes_argument(transport_mode: TransportModeFilter) -> str:
    """Return the trip argument restricting modes, or '' for both."""
    validate_transport_mode(transport_mode)
    if transport_mode == "both":
        return ""
    upstream_mode = JOURNEY_MODE_MAP[transport_mode]
    return f", modes: {{ transportModes: [{{ transportMode: {upstream_mode} }}] }}"


def build_trip_query_text(transport_mode: TransportModeFilter, include_date_time: bool) -> str:
    """Render the trip query for the given mode restriction and time toggle."""
    variable_definitions = _DATE_TIME_VARIABLES if include_date_time else ""
    trip_arguments = modes_argument(transport_mode)
    if include_date_time:
        trip_arguments += _DATE_TIME_ARGUMENTS
    return _TRIP_QUERY_TEMPLATE.format(
        variable_definitions=variable_definitions,
        trip_arguments=trip_arguments,
    )


def build_trip_query(
    from_place_id: str,
    to_place_id: str,
    transport_mode: TransportModeFilter = "both",
    num_trip_patterns: int = DEFAULT_TRIP_PATTERNS,
    date_time: str | None = None,
    arrive_by: bool = False,
) -> TripQuery:
    """Build the trip query and its variables.

    Args:
        from_place_id: Origin place ID (e.g., "NSR:StopPlace:59872").
        to_place_id: Destination place ID.
        transport_mode: "train", "bus" or "both".
        num_trip_patterns: Requested trip count, clamped to [1, 20].
        date_time: Optional ISO 8601 date/time. Empty means now.
        arrive_by: Treat date_time as latest arrival. Only bound with date_time.

    Returns:
        TripQuery with variables ``from``, ``to``, ``num`` and, when date_time
        is given, ``dateTime`` and ``arriveBy``.
    """
    include_date_time = bool(date_time)
    variables: dict[str, Any] = {
        "from": from_place_id,
        "to": to_place_id,
        "num": clamp_trip_patterns(num_trip_patterns),
    }
    if include_date_time:
        variables["dateTime"] = date_time
        variables["arriveBy"] = arrive_by

    return TripQuery(
        query=build_trip_query_text(transport_mode, include_date_time),
        variables=variables,
    )
