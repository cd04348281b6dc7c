"""Behavior-focused tests for the Entur Geocoder adapter."""

from typing import Any

import aiohttp
import pytest

from entur_mcp.adapters.entur_api.constants import GEOCODER_URL
from entur_mcp.adapters.entur_api.geocoder import (
    EnturGeocoder,
    get_transport_types,
    matches_transport_filter,
    parse_features,
)
from entur_mcp.domain.errors import UpstreamHttpError
from tests.fake_http import FakeResponse, FakeSession


def _feature(**properties: Any) -> dict[str, Any]:
    return {"type": "Feature", "properties": properties}


def _geocoder(session: FakeSession) -> EnturGeocoder:
    return EnturGeocoder(session=session)  # type: ignore[arg-type]


GEOCODER_RESPONSE = {
    "features": [
        _feature(
            label="Oslo S, Oslo",
            id="NSR:StopPlace:59872",
            layer="venue",
            category=["railStation", "onstreetBus"],
        ),
        _feature(
            label="Oslo lufthavn, Ullensaker",
            id="NSR:StopPlace:58211",
            layer="venue",
            category=["airport"],
            mode=[{"rail": {}}],
        ),
        _feature(
            label="Oslo bussterminal, Oslo",
            id="NSR:StopPlace:58382",
            layer="venue",
            category=["busStation"],
        ),
        _feature(
            label="Oslogata 1, Oslo",
            id="",
            layer="address",
            category=["street"],
        ),
    ]
}


class TestTransportTypes:
    """Tests for deriving transport tags from category and mode signals."""

    def test_when_category_is_rail_station_then_train(self) -> None:
        """Given category railStation and no mode, when deriving, then only train."""
        assert get_transport_types({"category": ["railStation"]}) == ("train",)

    def test_when_mode_has_bus_key_then_bus(self) -> None:
        """Given mode [{bus: {}}], when deriving, then bus is present."""
        assert "bus" in get_transport_types({"mode": [{"bus": {}}]})

    @pytest.mark.parametrize("category", ["busStation", "onstreetBus"])
    def test_when_category_is_bus_then_bus(self, category: str) -> None:
        """Given a bus category, when deriving, then only bus."""
        assert get_transport_types({"category": [category]}) == ("bus",)

    def test_when_mode_has_rail_key_then_train(self) -> None:
        """Given mode [{rail: {}}], when deriving, then only train."""
        assert get_transport_types({"mode": [{"rail": {"submode": "local"}}]}) == ("train",)

    def test_when_signals_come_from_both_sources_then_both_tags_in_order(self) -> None:
        """Given bus category and rail mode, when deriving, then train then bus."""
        properties = {"category": ["onstreetBus"], "mode": [{"rail": {}}]}

        assert get_transport_types(properties) == ("train", "bus")

    def test_when_both_sources_agree_then_tag_is_not_duplicated(self) -> None:
        """Given rail in category and mode, when deriving, then train appears once."""
        properties = {"category": ["railStation"], "mode": [{"rail": {}}]}

        assert get_transport_types(properties) == ("train",)

    def test_when_no_signal_then_empty(self) -> None:
        """Given an address with no rail or bus signal, when deriving, then empty."""
        assert get_transport_types({"category": ["street"], "mode": [{"water": {}}]}) == ()

    def test_when_properties_missing_then_empty(self) -> None:
        """Given no properties, when deriving, then empty."""
        assert get_transport_types(None) == ()

    def test_when_signal_fields_have_wrong_shape_then_ignored(self) -> None:
        """Given non-list category and non-dict mode entries, when deriving, then empty."""
        assert get_transport_types({"category": "railStation", "mode": ["bus"]}) == ()


class TestTransportFilter:
    """Tests for the transport filter policy."""

    def test_when_filter_is_both_then_requires_any_tag(self) -> None:
        """Given filter both, when matching, then untagged stops are rejected."""
        assert matches_transport_filter(("bus",), "both") is True
        assert matches_transport_filter((), "both") is False

    def test_when_filter_is_single_mode_then_requires_that_tag(self) -> None:
        """Given filter train, when matching, then only train-tagged stops pass."""
        assert matches_transport_filter(("train", "bus"), "train") is True
        assert matches_transport_filter(("bus",), "train") is False


class TestParseFeatures:
    """Tests for mapping geocoder bodies to StopResult."""

    def test_when_fields_missing_then_default_to_empty_string(self) -> None:
        """Given a feature with no properties, when parsing, then fields are empty strings."""
        stops = parse_features({"features": [{}, {"properties": None}]})

        assert [(s.name, s.id, s.layer, s.transport_types) for s in stops] == [
            ("", "", "", ()),
            ("", "", "", ()),
        ]

    def test_when_features_absent_then_empty_list(self) -> None:
        """Given a body without features, when parsing, then no stops."""
        assert parse_features({}) == []
        assert parse_features({"features": None}) == []


class TestSearchStops:
    """Tests for EnturGeocoder.search_stops."""

    @pytest.mark.asyncio
    async def test_when_searching_then_sends_text_lang_size_and_client_header(self) -> None:
        """Given a query, when searching, then one GET carries text, lang, size and header."""
        session = FakeSession(FakeResponse(GEOCODER_RESPONSE))
        geocoder = EnturGeocoder(
            session=session,  # type: ignore[arg-type]
            client_name="acme-test",
        )

        await geocoder.search_stops("Oslo", lang="nb", size=5)

        assert len(session.requests) == 1
        request = session.last_request
        assert request.method == "GET"
        assert request.url == GEOCODER_URL
        assert request.params == {"text": "Oslo", "lang": "nb", "size": "5"}
        assert request.headers["ET-Client-Name"] == "acme-test"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("size", "expected"), [(0, "1"), (-3, "1"), (500, "100"), (10, "10")])
    async def test_when_size_out_of_range_then_clamped(self, size: int, expected: str) -> None:
        """Given a size outside [1, 100], when searching, then the sent size is clamped."""
        session = FakeSession(FakeResponse({"features": []}))
        geocoder = _geocoder(session)

        await geocoder.search_stops("Oslo", size=size)

        assert session.last_request.params is not None
        assert session.last_request.params["size"] == expected

    @pytest.mark.asyncio
    async def test_when_no_filter_then_all_results_including_untagged(self) -> None:
        """Given no transport filter, when searching, then every result is returned in order."""
        geocoder = _geocoder(FakeSession(FakeResponse(GEOCODER_RESPONSE)))

        stops = await geocoder.search_stops("Oslo")

        assert [s.name for s in stops] == [
            "Oslo S, Oslo",
            "Oslo lufthavn, Ullensaker",
            "Oslo bussterminal, Oslo",
            "Oslogata 1, Oslo",
        ]
        assert stops[0].transport_types == ("train", "bus")
        assert stops[3].transport_types == ()

    @pytest.mark.asyncio
    async def test_when_filter_both_then_address_is_excluded(self) -> None:
        """Given filter both, when searching, then the untagged address is dropped."""
        geocoder = _geocoder(FakeSession(FakeResponse(GEOCODER_RESPONSE)))

        stops = await geocoder.search_stops("Oslo", transport_mode="both")

        assert "Oslogata 1, Oslo" not in [s.name for s in stops]
        assert len(stops) == 3

    @pytest.mark.asyncio
    async def test_when_filtering_train_then_bus_partitions_overlap_only_on_dual_stops(
        self,
    ) -> None:
        """Given train and bus filters, when searching, then only dual stops are in both."""
        session = FakeSession(FakeResponse(GEOCODER_RESPONSE))
        geocoder = _geocoder(session)

        train_ids = {s.id for s in await geocoder.search_stops("Oslo", transport_mode="train")}
        bus_ids = {s.id for s in await geocoder.search_stops("Oslo", transport_mode="bus")}

        assert train_ids == {"NSR:StopPlace:59872", "NSR:StopPlace:58211"}
        assert bus_ids == {"NSR:StopPlace:59872", "NSR:StopPlace:58382"}
        assert train_ids & bus_ids == {"NSR:StopPlace:59872"}

    @pytest.mark.asyncio
    async def test_when_upstream_returns_503_then_raises_http_error(self) -> None:
        """Given HTTP 503, when searching, then UpstreamHttpError references 503."""
        session = FakeSession(
            FakeResponse("maintenance", status=503, reason="Service Unavailable")
        )
        geocoder = _geocoder(session)

        with pytest.raises(UpstreamHttpError, match="503") as exc_info:
            await geocoder.search_stops("Oslo")

        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "Entur Geocoder error: 503 Service Unavailable"

    @pytest.mark.asyncio
    async def test_when_network_fails_then_error_propagates_unchanged(self) -> None:
        """Given a connection failure, when searching, then the aiohttp error propagates."""
        error = aiohttp.ClientConnectionError("connection refused")
        geocoder = _geocoder(FakeSession(error=error))

        with pytest.raises(aiohttp.ClientConnectionError) as exc_info:
            await geocoder.search_stops("Oslo")

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_when_filter_unknown_then_raises_before_request(self) -> None:
        """Given an unknown filter, when searching, then ValueError and no request."""
        session = FakeSession(FakeResponse(GEOCODER_RESPONSE))
        geocoder = _geocoder(session)

        with pytest.raises(ValueError, match="transport_mode"):
            await geocoder.search_stops("Oslo", transport_mode="tram")  # type: ignore[arg-type]

        assert session.requests == []

    @pytest.mark.asyncio
    async def test_when_session_missing_then_raises_runtime_error(self) -> None:
        """Given no session, when searching, then RuntimeError is raised."""
        geocoder = EnturGeocoder()

        with pytest.raises(RuntimeError, match="aiohttp session"):
            await geocoder.search_stops("Oslo")
