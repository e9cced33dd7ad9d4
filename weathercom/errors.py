"""Exceptions raised by the weather.com client."""


class WeatherClientError(Exception):
    """Base class for every failure surfaced by WeatherClient."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class RequestBuildError(WeatherClientError):
    """The request could not be constructed (bad coordinates, units or URL)."""


class TransportError(WeatherClientError):
    """The request was built but the network round trip failed."""


class DecodeError(WeatherClientError):
    """The response body is not JSON or does not match the expected schema."""

    def __init__(
        self, message: str, url: str | None = None, status_code: int | None = None
    ):
        super().__init__(message, url)
        self.status_code = status_code
