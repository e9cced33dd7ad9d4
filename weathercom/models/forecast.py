"""10-day daily forecast (forecast/daily/10day) models.

Night follows day. A forecast retrieved late in the day has a night part
but no day part for today, in which case ``day`` and ``max_temp`` are null.

Days and day parts are numbered separately, both starting at 1. Today is
num=1, and so is today's first day part. Tomorrow is num=2, its day part
num=2 and its night part num=3 (when today has only a night part). The
numbers are carried through exactly as received.
"""

from pydantic import Field

from weathercom.models.common import ApiModel, ApiResponse

DAILY_CLASS = "fod_long_range_daily"


class ForecastDaypart(ApiModel):
    # UTC timestamp and ISO8601 local time, e.g. "2018-07-16T19:00:00-0400"
    fcst_valid: int = 0
    fcst_valid_local: str = ""
    # "D" for day, "N" for night
    day_ind: str = ""
    # "Tonight", "Tomorrow", "Wednesday"
    daypart_name: str = ""
    long_daypart_name: str = ""
    alt_daypart_name: str = ""
    num: int = 0
    # Max temperature for a day part, min temperature for a night part
    temp: int = 0
    temp_phrase: str = ""
    clds: int = 0
    precip_type: str = ""
    pop: int = 0
    pop_phrase: str = ""
    accumulation_phrase: str = ""
    qualifier: str | None = None
    qualifier_code: str | None = None
    # 0 no thunder, 1 possible, 2 expected
    thunder_enum: int = 0
    thunder_enum_phrase: str = ""
    wspd: int = 0
    wdir: int = 0
    wdir_cardinal: str = ""
    wind_phrase: str = ""
    phrase_12char: str = ""
    phrase_22char: str = ""
    phrase_32char: str = ""
    subphrase_pt1: str = ""
    subphrase_pt2: str = ""
    subphrase_pt3: str = ""
    shortcast: str = ""
    narrative: str = ""
    qpf: float = 0.0
    snow_qpf: float = 0.0
    snow_range: str = ""
    snow_phrase: str = ""
    snow_code: str = ""
    uv_index_raw: float = 0.0
    uv_index: int = 0
    uv_warning: int = 0
    uv_desc: str = ""
    # golf_category is "" when golf_index is null
    golf_index: int | None = None
    golf_category: str = ""
    wxman: str = ""
    hi: int = 0
    wc: int = 0
    rh: int = 0
    vocal_key: str = ""
    icon_extd: int = 0
    icon_code: int = 0


class DailyForecast(ApiModel):
    class_: str = Field(default="", alias="class")
    expire_time_gmt: int = 0
    fcst_valid: int = 0
    fcst_valid_local: str = ""
    dow: str = ""
    num: int = 0
    max_temp: int | None = None
    min_temp: int = 0
    torcon: str | None = None
    stormcon: str | None = None
    blurb: str | None = None
    blurb_author: str | None = None
    lunar_phase_day: int = 0
    lunar_phase: str = ""
    lunar_phase_code: str = ""
    sunrise: str = ""
    sunset: str = ""
    moonrise: str = ""
    moonset: str = ""
    qualifier_code: str | None = None
    qualifier: str | None = None
    # Covers both day parts, including high and low temperatures
    narrative: str = ""
    qpf: float = 0.0
    snow_qpf: float = 0.0
    snow_range: str = ""
    snow_phrase: str = ""
    snow_code: str = ""
    night: ForecastDaypart = Field(default_factory=ForecastDaypart)
    day: ForecastDaypart | None = None


class Forecast10Response(ApiResponse):
    forecasts: list[DailyForecast] = Field(default_factory=list)
