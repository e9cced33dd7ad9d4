"""Current conditions (observations/current) models."""

from pydantic import Field

from weathercom.models.common import ApiModel, ApiResponse

UNIT_BLOCK_NAMES = ("imperial", "metric", "metric_si", "uk_hybrid")


class ObservationUnits(ApiModel):
    """Measurements of one observation expressed in a single unit system."""

    wspd: int | None = None
    gust: int | None = None
    vis: float | None = None
    mslp: float | None = None
    altimeter: float | None = None
    temp: int | None = None
    dewpt: int | None = None
    rh: int | None = None
    wc: int | None = None
    hi: int | None = None
    temp_change_24hour: int | None = None
    temp_max_24hour: int | None = None
    temp_min_24hour: int | None = None
    pchange: float | None = None
    feels_like: int | None = None
    snow_1hour: float | None = None
    snow_6hour: float | None = None
    snow_24hour: float | None = None
    snow_mtd: float | None = None
    snow_season: float | None = None
    snow_ytd: float | None = None
    snow_2day: float | None = None
    snow_3day: float | None = None
    snow_7day: float | None = None
    ceiling: int | None = None
    precip_1hour: float | None = None
    precip_6hour: float | None = None
    precip_24hour: float | None = None
    precip_mtd: float | None = None
    precip_ytd: float | None = None
    precip_2day: float | None = None
    precip_3day: float | None = None
    precip_7day: float | None = None
    obs_qualifier_100char: str | None = None
    obs_qualifier_50char: str | None = None
    obs_qualifier_32char: str | None = None


class Observation(ApiModel):
    # "observation"
    class_: str = Field(default="", alias="class")
    expire_time_gmt: int = 0
    obs_id: str = ""
    obs_name: str = ""
    # UTC timestamp and ISO8601 local time of the observation
    obs_time: int = 0
    obs_time_local: str = ""
    wdir: int | None = None
    wdir_cardinal: str = ""
    icon_code: int = 0
    icon_extd: int = 0
    sunrise: str = ""
    sunset: str = ""
    day_ind: str = ""
    uv_index: int = 0
    uv_warning: int = 0
    uv_desc: str = ""
    wxman: str = ""
    obs_qualifier_code: str | None = None
    obs_qualifier_severity: int | None = None
    ptend_code: int = 0
    ptend_desc: str = ""
    dow: str = ""
    snow_hrs: int | None = None
    phrase_12char: str = ""
    phrase_22char: str = ""
    phrase_32char: str = ""
    sky_cover: str = ""
    clds: str = ""
    vocal_key: str = ""
    # Only the blocks for the requested unit code are sent.
    imperial: ObservationUnits | None = None
    metric: ObservationUnits | None = None
    metric_si: ObservationUnits | None = None
    uk_hybrid: ObservationUnits | None = None

    def unit_blocks(self) -> dict[str, ObservationUnits]:
        """Return the populated unit blocks keyed by field name."""
        blocks = {}
        for name in UNIT_BLOCK_NAMES:
            block = getattr(self, name)
            if block is not None:
                blocks[name] = block
        return blocks


class CurrentResponse(ApiResponse):
    observation: Observation = Field(default_factory=Observation)
