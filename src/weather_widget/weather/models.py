"""Typed models for normalized weather data.

All numeric fields are stored in imperial units (°F, mph). Conversion to the
user's display unit happens only when formatting.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

FORECAST_DAY_COUNT = 3


class CurrentConditions(BaseModel):
    """Current conditions at the resolved location."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature_f: float
    feels_like_f: float
    conditions_text: str = ""
    humidity_pct: float = 0.0
    uv_index: float = 0.0
    wind_speed_mph: float = 0.0
    icon_code: str | None = None


class ForecastDay(BaseModel):
    """One day of the short-term forecast."""

    model_config = ConfigDict(frozen=True)

    date_iso: str
    temp_max_f: float
    temp_min_f: float
    sunrise_local: str = ""
    sunset_local: str = ""
    conditions_text: str = ""
    icon_code: str | None = None


class ForecastSet(BaseModel):
    """The three days following the request day, nearest first."""

    model_config = ConfigDict(frozen=True)

    days: tuple[ForecastDay, ...]

    @field_validator("days")
    @classmethod
    def exactly_three_days(cls, value: tuple[ForecastDay, ...]) -> tuple[ForecastDay, ...]:
        if len(value) != FORECAST_DAY_COUNT:
            raise ValueError(
                f"ForecastSet requires exactly {FORECAST_DAY_COUNT} days, got {len(value)}."
            )
        return value
