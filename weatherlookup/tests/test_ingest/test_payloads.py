"""Tests for upstream payload parsing."""

import pytest

from weatherlookup.ingest.payloads import PayloadError, parse_current, parse_series
from weatherlookup.models.weather import Coordinates


class TestParseCurrent:
    def test_fixture(self, current_payload: dict):
        c = parse_current(current_payload)
        assert c.place_name == "Surakarta"
        assert c.temperature == 29.4
        assert c.humidity == 77
        assert c.feels_like == 33.1
        assert c.condition_main == "Clouds"
        assert c.description == "broken clouds"
        assert c.icon == "04d"
        assert c.coord == Coordinates(lat=-7.5755, lon=110.8243)

    def test_missing_fields_default(self):
        c = parse_current({})
        assert c.place_name == ""
        assert c.temperature == 0.0
        assert c.description == ""
        assert c.coord is None

    def test_empty_weather_list(self):
        c = parse_current({"name": "X", "main": {"temp": 1}, "weather": []})
        assert c.condition_main == ""
        assert c.icon == ""

    def test_not_an_object(self):
        with pytest.raises(PayloadError):
            parse_current([])

    def test_bad_number(self):
        with pytest.raises(PayloadError):
            parse_current({"name": "X", "main": {"temp": "hot"}})

    def test_bad_coordinates(self):
        with pytest.raises(PayloadError):
            parse_current({"name": "X", "coord": {"lat": "north", "lon": 1.0}})


class TestParseSeries:
    def test_fixture(self, forecast_payload: dict):
        series = parse_series(forecast_payload)
        assert len(series) == 40
        first = series[0]
        assert first.timestamp == 1770800400
        assert first.temp == 24.5
        assert first.temp_min == 23.2
        assert first.temp_max == 26.2
        assert first.description == "broken clouds"
        assert first.icon == "04d"

    def test_order_preserved(self, forecast_payload: dict):
        series = parse_series(forecast_payload)
        stamps = [s.timestamp for s in series]
        assert stamps == sorted(stamps)

    def test_missing_list_is_empty(self):
        assert parse_series({}) == ()

    def test_item_without_weather(self):
        series = parse_series({"list": [{"dt": 1, "main": {"temp": 2.5}}]})
        assert series[0].description == ""
        assert series[0].icon == ""

    def test_list_not_array(self):
        with pytest.raises(PayloadError):
            parse_series({"list": "nope"})

    def test_malformed_item(self):
        with pytest.raises(PayloadError):
            parse_series({"list": ["nope"]})
