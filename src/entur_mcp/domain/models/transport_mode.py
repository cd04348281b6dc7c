"""Transport mode types shared by stop and journey searches."""

from typing import Literal

# Tag derived for a stop from upstream category/mode signals
TransportType = Literal["train", "bus"]

# Caller-facing filter accepted by both searches
TransportModeFilter = Literal["train", "bus", "both"]

TRANSPORT_MODE_FILTERS: tuple[str, ...] = ("train", "bus", "both")


def validate_transport_mode(transport_mode: str) -> str:
    """Return the mode unchanged or raise ValueError when it is not train, bus or both."""
    if transport_mode not in TRANSPORT_MODE_FILTERS:
        raise ValueError(
            f"transport_mode must be one of {', '.join(TRANSPORT_MODE_FILTERS)}, "
            f"got {transport_mode!r}"
        )
    return transport_mode
