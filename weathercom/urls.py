"""URL construction for the weather.com v1 geocode endpoints."""

import math
from decimal import Decimal
from enum import StrEnum
from urllib.parse import quote

import httpx

from weathercom.errors import RequestBuildError
from weathercom.models.common import DEFAULT_UNITS, UnitSystem

WEATHER_COM_BASE_URL = "https://api.weather.com/v1"


class Endpoint(StrEnum):
    CURRENT = "observations/current"
    WWIR = "forecast/wwir"
    FORECAST_10DAY = "forecast/daily/10day"
    HOURLY_240HOUR = "forecast/hourly/240hour"


def format_coordinate(value: float) -> str:
    """Render a coordinate as plain decimal text, e.g. 0.00001 not 1e-05."""
    return format(Decimal(repr(float(value))).normalize(), "f")


def normalize_units(units: str | None) -> UnitSystem:
    """Map a unit code to UnitSystem. Empty or None means imperial."""
    if not units:
        return DEFAULT_UNITS
    try:
        return UnitSystem(units)
    except ValueError as e:
        allowed = ", ".join(u.value for u in UnitSystem)
        raise RequestBuildError(
            f"Unknown unit code {units!r} (expected one of {allowed})"
        ) from e


def _check_coordinate(name: str, value: float, limit: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RequestBuildError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise RequestBuildError(f"{name} {value!r} outside [-{limit:g}, {limit:g}]")


def build_url(
    lat: float,
    lng: float,
    endpoint: Endpoint | str,
    api_key: str,
    units: str | None = DEFAULT_UNITS,
    base_url: str = WEATHER_COM_BASE_URL,
) -> str:
    """Build the full request URL for one geocode endpoint.

    Raises RequestBuildError if the coordinates or unit code are invalid or
    the result is not a parseable URL.
    """
    _check_coordinate("latitude", lat, 90)
    _check_coordinate("longitude", lng, 180)
    unit_code = normalize_units(units)

    url = (
        f"{base_url.rstrip('/')}/geocode/"
        f"{quote(format_coordinate(lat), safe='')}/"
        f"{quote(format_coordinate(lng), safe='')}/"
        f"{endpoint}.json"
        f"?apiKey={quote(api_key, safe='')}&units={quote(unit_code.value, safe='')}"
    )
    try:
        httpx.URL(url)
    except httpx.InvalidURL as e:
        raise RequestBuildError(f"Invalid request URL: {e}") from e
    return url


def mask_api_key(url: str, api_key: str) -> str:
    """Hide the API key in a URL before it is logged or attached to an error."""
    if not api_key:
        return url
    return url.replace(f"apiKey={quote(api_key, safe='')}", "apiKey=***")
