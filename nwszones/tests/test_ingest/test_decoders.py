"""Tests for NWS response decoders."""

import pytest

from nwszones.ingest.decoders import decode_forecast, decode_zones
from nwszones.ingest.errors import DecodeError, TransportError
from nwszones.models.forecast import ForecastPeriod
from nwszones.models.zone import Zone


class TestDecodeZones:
    def test_fixture(self, co_zones: dict):
        zones = decode_zones(co_zones)
        assert len(zones) == 4
        assert zones[0] == Zone(id="COZ039", name="Denver")
        assert zones[2] is None
        assert zones[3].id == "COZ042"

    def test_preserves_server_order(self, zones_payload):
        zones = decode_zones(zones_payload(12))
        assert [z.id for z in zones] == [f"COZ{i:03d}" for i in range(1, 13)]

    def test_empty(self):
        assert decode_zones({"features": []}) == []

    def test_missing_features(self):
        with pytest.raises(DecodeError):
            decode_zones({"type": "FeatureCollection"})

    def test_missing_id(self):
        raw = {"features": [{"properties": {"name": "Denver"}}]}
        with pytest.raises(DecodeError, match="'id'"):
            decode_zones(raw)

    def test_decode_error_is_transport_error(self):
        with pytest.raises(TransportError):
            decode_zones({})


class TestDecodeForecast:
    def test_periods(self, coz039_forecast: dict):
        forecast = decode_forecast(coz039_forecast, "COZ039")
        assert forecast.has_periods
        assert [p.name for p in forecast.periods] == [
            "Tonight", "Wednesday", "Wednesday Night",
        ]
        assert forecast.detailed_forecast is None

    def test_narrative(self, narrative_forecast: dict):
        forecast = decode_forecast(narrative_forecast, "AKZ999")
        assert not forecast.has_periods
        assert forecast.detailed_forecast == "Sunny skies"

    def test_null_periods_falls_back(self):
        raw = {"properties": {"periods": None, "detailedForecast": "Windy"}}
        forecast = decode_forecast(raw, "COZ039")
        assert forecast.periods == ()
        assert forecast.detailed_forecast == "Windy"

    def test_empty_periods_falls_back(self):
        forecast = decode_forecast({"properties": {"periods": []}}, "COZ039")
        assert not forecast.has_periods
        assert forecast.detailed_forecast is None

    def test_no_properties(self):
        forecast = decode_forecast({}, "COZ039")
        assert not forecast.has_periods
        assert forecast.detailed_forecast is None

    def test_period_missing_narrative(self):
        raw = {"properties": {"periods": [{"name": "Tonight"}]}}
        with pytest.raises(DecodeError, match="detailedForecast"):
            decode_forecast(raw, "COZ039")

    def test_periods_not_a_list(self):
        with pytest.raises(DecodeError):
            decode_forecast({"properties": {"periods": "Tonight"}}, "COZ039")

    def test_period_values(self, coz039_forecast: dict):
        forecast = decode_forecast(coz039_forecast, "COZ039")
        assert forecast.periods[1] == ForecastPeriod(
            name="Wednesday",
            detailed_forecast="Sunny. Highs in the lower 70s. Light winds.",
        )
