"""Hourly forecast (forecast/hourly/240hour) models."""

from pydantic import Field

from weathercom.models.common import ApiModel, ApiResponse

HOURLY_CLASS = "fod_short_range_hourly"


class HourlyForecast(ApiModel):
    class_: str = Field(default="", alias="class")
    expire_time_gmt: int = 0
    fcst_valid: int = 0
    fcst_valid_local: str = ""
    num: int = 0
    day_ind: str = ""
    temp: int = 0
    dewpt: int = 0
    hi: int = 0
    wc: int = 0
    feels_like: int = 0
    icon_extd: int = 0
    wxman: str = ""
    icon_code: int = 0
    dow: str = ""
    phrase_12char: str = ""
    phrase_22char: str = ""
    phrase_32char: str = ""
    subphrase_pt1: str = ""
    subphrase_pt2: str = ""
    subphrase_pt3: str = ""
    pop: int = 0
    precip_type: str = ""
    rh: int = 0
    wspd: int = 0
    wdir: int = 0
    wdir_cardinal: str = ""
    gust: int | None = None
    clds: int = 0
    vis: float = 0.0
    mslp: float = 0.0
    uv_index_raw: float = 0.0
    uv_index: int = 0
    uv_warning: int = 0
    uv_desc: str = ""
    golf_index: int | None = None
    golf_category: str = ""
    severity: int = 0
    qpf: float = 0.0
    snow_qpf: float = 0.0


class HourlyForecastResponse(ApiResponse):
    forecasts: list[HourlyForecast] = Field(default_factory=list)
