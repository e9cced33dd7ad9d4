"""Common types shared by every weather.com response model."""

from enum import StrEnum
from functools import lru_cache
from typing import Any, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UnitSystem(StrEnum):
    IMPERIAL = "e"
    METRIC = "m"
    METRIC_SI = "s"
    UK_HYBRID = "h"
    ALL = "a"


DEFAULT_UNITS = UnitSystem.IMPERIAL


@lru_cache(maxsize=None)
def _non_nullable_keys(model: type[BaseModel]) -> frozenset[str]:
    """Payload keys (names and aliases) whose field type does not admit None."""
    keys = set()
    for name, field in model.model_fields.items():
        if type(None) in get_args(field.annotation):
            continue
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return frozenset(keys)


class ApiModel(BaseModel):
    """Immutable snapshot of an upstream JSON object.

    Unknown keys are ignored. Keys missing from the payload keep their
    zero-value default and are left out of ``model_fields_set``, so a field
    that was absent can still be told apart from one sent as ``null``.
    A ``null`` sent for a field that is not nullable is treated as absent.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        strict=True,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_for_non_nullable(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        skip = _non_nullable_keys(cls)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key not in skip
        }

    def to_json(self, indent: int | None = None) -> str:
        """Re-encode with upstream key names, keeping only fields that were sent."""
        return self.model_dump_json(by_alias=True, exclude_unset=True, indent=indent)


class Metadata(ApiModel):
    language: str = ""
    transaction_id: str = ""
    version: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    units: str = ""
    expire_time_gmt: int = 0
    status_code: int = 0


class ApiErrorDetail(ApiModel):
    code: str = ""
    message: str = ""


class ApiErrorEntry(ApiModel):
    error: ApiErrorDetail = Field(default_factory=ApiErrorDetail)


class ApiResponse(ApiModel):
    """Envelope fields present on every response body.

    ``success`` and ``errors`` only appear when weather.com rejects a request
    (bad key, bad location); they are carried through uninterpreted.
    """

    metadata: Metadata = Field(default_factory=Metadata)
    success: bool | None = None
    errors: list[ApiErrorEntry] | None = None
