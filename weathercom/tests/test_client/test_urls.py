"""Tests for request URL construction."""

import math

import pytest

from weathercom.errors import RequestBuildError
from weathercom.models.common import UnitSystem
from weathercom.urls import (
    WEATHER_COM_BASE_URL,
    Endpoint,
    build_url,
    format_coordinate,
    mask_api_key,
    normalize_units,
)


class TestFormatCoordinate:
    def test_plain_decimal(self):
        assert format_coordinate(40.754864) == "40.754864"
        assert format_coordinate(-74.007156) == "-74.007156"

    def test_no_scientific_notation(self):
        assert format_coordinate(0.00001) == "0.00001"
        assert format_coordinate(-1.5e-7) == "-0.00000015"

    def test_integral_values(self):
        assert format_coordinate(90) == "90"
        assert format_coordinate(0.0) == "0"


class TestNormalizeUnits:
    @pytest.mark.parametrize("code", ["e", "m", "s", "h", "a"])
    def test_known_codes(self, code: str):
        assert normalize_units(code) == UnitSystem(code)

    def test_empty_means_imperial(self):
        assert normalize_units("") == UnitSystem.IMPERIAL
        assert normalize_units(None) == UnitSystem.IMPERIAL

    def test_unknown_code(self):
        with pytest.raises(RequestBuildError, match="Unknown unit code"):
            normalize_units("x")


class TestBuildUrl:
    def test_current(self):
        url = build_url(40.754864, -74.007156, Endpoint.CURRENT, "abc123", "e")
        assert url == (
            "https://api.weather.com/v1/geocode/40.754864/-74.007156/"
            "observations/current.json?apiKey=abc123&units=e"
        )

    @pytest.mark.parametrize(
        ("endpoint", "fragment"),
        [
            (Endpoint.CURRENT, "observations/current"),
            (Endpoint.WWIR, "forecast/wwir"),
            (Endpoint.FORECAST_10DAY, "forecast/daily/10day"),
            (Endpoint.HOURLY_240HOUR, "forecast/hourly/240hour"),
        ],
    )
    def test_endpoints(self, endpoint: Endpoint, fragment: str):
        url = build_url(1.5, 2.5, endpoint, "k")
        assert url.startswith(f"{WEATHER_COM_BASE_URL}/geocode/1.5/2.5/{fragment}.json?")

    def test_default_units(self):
        assert build_url(1.0, 2.0, Endpoint.WWIR, "k").endswith("&units=e")
        assert build_url(1.0, 2.0, Endpoint.WWIR, "k", "").endswith("&units=e")

    def test_api_key_escaped(self):
        url = build_url(1.0, 2.0, Endpoint.WWIR, "a b/c&d=e", "m")
        assert "apiKey=a%20b%2Fc%26d%3De&units=m" in url

    def test_custom_base_url(self):
        url = build_url(1.0, 2.0, Endpoint.WWIR, "k", base_url="http://localhost:8080/v1/")
        assert url.startswith("http://localhost:8080/v1/geocode/1/2/forecast/wwir.json")

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
    )
    def test_out_of_range(self, lat: float, lng: float):
        with pytest.raises(RequestBuildError):
            build_url(lat, lng, Endpoint.CURRENT, "k")

    def test_range_edges_allowed(self):
        url = build_url(-90.0, 180.0, Endpoint.CURRENT, "k")
        assert "/geocode/-90/180/" in url

    def test_non_numeric_coordinate(self):
        with pytest.raises(RequestBuildError, match="must be a number"):
            build_url("40.7", 0.0, Endpoint.CURRENT, "k")

    def test_unparseable_base_url(self):
        with pytest.raises(RequestBuildError):
            build_url(1.0, 2.0, Endpoint.CURRENT, "k", base_url="http://example.com:notaport/v1")


class TestMaskApiKey:
    def test_masks_key(self):
        url = build_url(1.0, 2.0, Endpoint.CURRENT, "secret", "e")
        masked = mask_api_key(url, "secret")
        assert "secret" not in masked
        assert "apiKey=***&units=e" in masked

    def test_empty_key(self):
        assert mask_api_key("https://x/y", "") == "https://x/y"
