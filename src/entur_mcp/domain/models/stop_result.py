"""Stop search result domain model."""

from dataclasses import dataclass, field

from entur_mcp.domain.models.transport_mode import TransportType


@dataclass(frozen=True)
class StopResult:
    """Represents one place matched by the geocoder."""

    name: str  # Display label, empty when upstream omits it
    id: str  # Opaque place identifier (e.g., "NSR:StopPlace:59872")
    layer: str  # Upstream classification (e.g., "venue", "address")
    transport_types: tuple[TransportType, ...] = field(default_factory=tuple)

    @property
    def has_transport(self) -> bool:
        """True when a train or bus signal was found for this place."""
        return bool(self.transport_types)
