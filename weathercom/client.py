"""weather.com v1 geocode API client.

Each call performs one synchronous GET and decodes the body into the
matching response model. There are no retries and no caching.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import ValidationError

from weathercom.config.schema import ClientConfig
from weathercom.errors import DecodeError, RequestBuildError, TransportError
from weathercom.models.common import DEFAULT_UNITS, ApiResponse
from weathercom.models.current import CurrentResponse
from weathercom.models.forecast import Forecast10Response
from weathercom.models.hourly import HourlyForecastResponse
from weathercom.models.wwir import WwirResponse
from weathercom.urls import WEATHER_COM_BASE_URL, Endpoint, build_url, mask_api_key

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=ApiResponse)


class WeatherClient:
    """Client for the weather.com geocode endpoints.

    The API key is opaque and not checked locally. A single httpx.Client is
    reused for every call; pass ``http_client`` to supply your own, in which
    case closing it stays the caller's job.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHER_COM_BASE_URL,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "WeatherClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "WeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Endpoints ---

    def get_current(
        self, lat: float, lng: float, units: str | None = DEFAULT_UNITS
    ) -> CurrentResponse:
        """Fetch current conditions.

        Only the observation unit blocks matching ``units`` are populated;
        ``"a"`` populates all four.
        """
        return self._get(Endpoint.CURRENT, lat, lng, units, CurrentResponse)

    def get_wwir(
        self, lat: float, lng: float, units: str | None = DEFAULT_UNITS
    ) -> WwirResponse:
        """Fetch the imminent precipitation narrative."""
        return self._get(Endpoint.WWIR, lat, lng, units, WwirResponse)

    def get_forecast10(
        self, lat: float, lng: float, units: str | None = DEFAULT_UNITS
    ) -> Forecast10Response:
        """Fetch the 10-day daily forecast."""
        return self._get(Endpoint.FORECAST_10DAY, lat, lng, units, Forecast10Response)

    def get_hourly(
        self, lat: float, lng: float, units: str | None = DEFAULT_UNITS
    ) -> HourlyForecastResponse:
        """Fetch the hourly forecast (up to 240 hours)."""
        return self._get(
            Endpoint.HOURLY_240HOUR, lat, lng, units, HourlyForecastResponse
        )

    # --- Transport/decode ---

    def _get(
        self,
        endpoint: Endpoint,
        lat: float,
        lng: float,
        units: str | None,
        response_type: type[ResponseT],
    ) -> ResponseT:
        try:
            url = build_url(lat, lng, endpoint, self.api_key, units, self.base_url)
        except RequestBuildError as e:
            logger.error("Could not build %s request: %s", endpoint, e)
            raise
        safe_url = mask_api_key(url, self.api_key)
        logger.debug("GET %s", safe_url)

        try:
            request = self._http.build_request("GET", url)
        except httpx.InvalidURL as e:
            logger.error("Could not build request for %s: %s", safe_url, e)
            raise RequestBuildError(f"Could not build request: {e}", safe_url) from e

        try:
            resp = self._http.send(request)
        except httpx.RequestError as e:
            logger.error("weather.com request failed: %s -> %s", safe_url, e)
            raise TransportError(f"Request failed: {e}", safe_url) from e

        try:
            return response_type.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error(
                "Could not decode %s response (HTTP %d): %s",
                endpoint, resp.status_code, e,
            )
            raise DecodeError(
                f"Could not decode {endpoint} response: {e}",
                safe_url,
                resp.status_code,
            ) from e
