"""Display-ready view models handed to a View."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FormattedCurrent:
    """Current conditions with every value already formatted for display."""

    location: str
    temperature: str
    feels_like: str
    conditions: str
    glyph: str
    humidity: str
    uv_index: str
    wind_speed: str


@dataclass(slots=True, frozen=True)
class FormattedForecastDay:
    """One forecast day formatted for display."""

    date_iso: str
    date_label: str
    temp_high: str
    temp_low: str
    conditions: str
    glyph: str
    sunrise: str
    sunset: str
