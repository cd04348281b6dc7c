"""Entur Geocoder adapter: search stops by name and get NSR:StopPlace IDs.

Transport types are derived from two signals on each feature: the
``category`` list and the ``mode`` list of single-key objects.
"""

import logging
from typing import TYPE_CHECKING, Any

from entur_mcp.adapters.entur_api.constants import (
    BUS_CATEGORIES,
    BUS_MODE_KEY,
    DEFAULT_ET_CLIENT_NAME,
    DEFAULT_STOP_RESULTS,
    GEOCODER_SERVICE,
    GEOCODER_URL,
    RAIL_CATEGORIES,
    RAIL_MODE_KEY,
)
from entur_mcp.adapters.entur_api.http_client import EnturHttpClient
from entur_mcp.adapters.entur_api.parameters import clamp_stop_results
from entur_mcp.domain.models.stop_result import StopResult
from entur_mcp.domain.models.transport_mode import (
    TransportModeFilter,
    TransportType,
    validate_transport_mode,
)
from entur_mcp.domain.ports.stop_search import StopSearch

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _string_or_empty(value: Any) -> str:
    return "" if value is None else str(value)


def _has_mode_key(modes: list[Any], key: str) -> bool:
    return any(isinstance(mode, dict) and key in mode for mode in modes)


def get_transport_types(properties: dict[str, Any] | None) -> tuple[TransportType, ...]:
    """Derive transport tags for a geocoder feature.

    Train if the category list has ``railStation`` or a mode entry has a ``rail``
    key; bus if the category list has ``busStation``/``onstreetBus`` or a mode
    entry has a ``bus`` key. Both tags may be present, in that order.
    """
    if not properties:
        return ()

    categories = _as_list(properties.get("category"))
    modes = _as_list(properties.get("mode"))

    has_rail = any(c in RAIL_CATEGORIES for c in categories) or _has_mode_key(
        modes, RAIL_MODE_KEY
    )
    has_bus = any(c in BUS_CATEGORIES for c in categories) or _has_mode_key(modes, BUS_MODE_KEY)

    types: list[TransportType] = []
    if has_rail:
        types.append("train")
    if has_bus:
        types.append("bus")
    return tuple(types)


def matches_transport_filter(
    transport_types: tuple[TransportType, ...], transport_mode: TransportModeFilter
) -> bool:
    """Check a stop's tags against a filter.

    ``both`` keeps any stop with at least one tag, so untagged results such as
    plain addresses are dropped. ``train`` and ``bus`` need that exact tag.
    """
    if transport_mode == "both":
        return len(transport_types) > 0
    return transport_mode in transport_types


def parse_feature(feature: Any) -> StopResult:
    """Map one GeoJSON feature to a StopResult, defaulting missing fields to ''."""
    properties = feature.get("properties") if isinstance(feature, dict) else None
    if not isinstance(properties, dict):
        properties = {}

    return StopResult(
        name=_string_or_empty(properties.get("label")),
        id=_string_or_empty(properties.get("id")),
        layer=_string_or_empty(properties.get("layer")),
        transport_types=get_transport_types(properties),
    )


def parse_features(data: Any) -> list[StopResult]:
    """Map a geocoder response body to stop results, in upstream order."""
    features = data.get("features") if isinstance(data, dict) else None
    return [parse_feature(feature) for feature in _as_list(features)]


class EnturGeocoder(StopSearch):
    """Adapter for the Entur Geocoder autocomplete endpoint."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        client_name: str = DEFAULT_ET_CLIENT_NAME,
        url: str = GEOCODER_URL,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            client_name: Value sent in the ET-Client-Name header.
            url: Autocomplete endpoint URL.
        """
        self._http_client = EnturHttpClient(session=session, client_name=client_name)
        self._url = url

    async def search_stops(
        self,
        text: str,
        lang: str = "en",
        size: int = DEFAULT_STOP_RESULTS,
        transport_mode: TransportModeFilter | None = None,
    ) -> list[StopResult]:
        """Search for stops by free text.

        Args:
            text: Stop or place name (e.g., "Oslo S").
            lang: Language of the returned labels.
            size: Number of results to request, clamped to [1, 100].
            transport_mode: Optional filter: "train", "bus" or "both".
                None returns every result, untagged ones included.

        Returns:
            List of StopResult in upstream order.

        Raises:
            UpstreamHttpError: If the geocoder answers with a non-success status.
            ValueError: If transport_mode is not a known filter.
        """
        if transport_mode is not None:
            validate_transport_mode(transport_mode)

        params = {
            "text": text,
            "lang": lang,
            "size": str(clamp_stop_results(size)),
        }
        data = await self._http_client.get_json(self._url, params, GEOCODER_SERVICE)
        results = parse_features(data)

        if transport_mode:
            results = [
                s for s in results if matches_transport_filter(s.transport_types, transport_mode)
            ]

        logger.debug(f"Geocoder returned {len(results)} stop(s) for '{text}'")
        return results
