"""Pydantic v2 configuration schema for the client and CLI."""

from pydantic import BaseModel, Field, field_validator

from weathercom.models.common import DEFAULT_UNITS, UnitSystem
from weathercom.urls import WEATHER_COM_BASE_URL


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = WEATHER_COM_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    units: UnitSystem = DEFAULT_UNITS

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        text = value.strip().rstrip("/")
        if not text.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return text
