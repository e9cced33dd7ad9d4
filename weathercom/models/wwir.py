"""Imminent precipitation (forecast/wwir) models."""

from pydantic import Field

from weathercom.models.common import ApiModel, ApiResponse

WWIR_CLASS = "fod_short_range_wwir"


class WwirForecast(ApiModel):
    class_: str = Field(default="", alias="class")
    expire_time_gmt: int = 0
    fcst_valid: int = 0
    fcst_valid_local: str = ""
    # 0 when no precipitation is expected within the forecast window
    overall_type: int = 0
    # ex: "Rain ending in 20 min"
    phrase: str = ""
    terse_phrase: str = ""
    # Templates use placeholders filled from the precip_* fields, e.g.
    # "Rain ending in {time}"
    phrase_template: str = ""
    terse_phrase_template: str = ""
    precip_day: str = ""
    precip_time_24hr: str = ""
    precip_time_12hr: str = ""
    precip_time_iso: str = ""
    time_zone_abbrv: str = ""


class WwirResponse(ApiResponse):
    forecast: WwirForecast = Field(default_factory=WwirForecast)
