"""Formatting of canonical weather models into view models.

Pure functions of (model, unit); the stored models are never modified.
"""

from __future__ import annotations

from datetime import date, time

from ..units import (
    DisplayUnit,
    to_display_index,
    to_display_percent,
    to_display_temperature,
    to_display_wind_speed,
)
from ..weather.icons import glyph_for
from ..weather.models import CurrentConditions, ForecastDay, ForecastSet
from .models import FormattedCurrent, FormattedForecastDay

DATE_LABEL_FORMAT = "%a %b %d"
CLOCK_FORMAT = "%H:%M"


def format_current(current: CurrentConditions, unit: DisplayUnit) -> FormattedCurrent:
    return FormattedCurrent(
        location=current.location,
        temperature=to_display_temperature(current.temperature_f, unit),
        feels_like=to_display_temperature(current.feels_like_f, unit),
        conditions=current.conditions_text,
        glyph=glyph_for(current.icon_code),
        humidity=to_display_percent(current.humidity_pct),
        uv_index=to_display_index(current.uv_index),
        wind_speed=to_display_wind_speed(current.wind_speed_mph, unit),
    )


def format_forecast_day(day: ForecastDay, unit: DisplayUnit) -> FormattedForecastDay:
    return FormattedForecastDay(
        date_iso=day.date_iso,
        date_label=format_date_label(day.date_iso),
        temp_high=to_display_temperature(day.temp_max_f, unit),
        temp_low=to_display_temperature(day.temp_min_f, unit),
        conditions=day.conditions_text,
        glyph=glyph_for(day.icon_code),
        sunrise=format_clock(day.sunrise_local),
        sunset=format_clock(day.sunset_local),
    )


def format_forecast(forecast: ForecastSet, unit: DisplayUnit) -> list[FormattedForecastDay]:
    return [format_forecast_day(day, unit) for day in forecast.days]


def format_date_label(date_iso: str) -> str:
    """`2026-10-20` -> `Tue Oct 20`; unparseable values are shown as given."""
    try:
        return date.fromisoformat(date_iso).strftime(DATE_LABEL_FORMAT)
    except ValueError:
        return date_iso


def format_clock(local_time: str) -> str:
    """`06:42:10` -> `06:42`; empty stays empty, unparseable is shown as given."""
    if not local_time:
        return ""
    try:
        return time.fromisoformat(local_time).strftime(CLOCK_FORMAT)
    except ValueError:
        return local_time
