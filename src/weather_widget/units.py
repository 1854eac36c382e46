"""Unit conversion and display formatting for canonical imperial values."""

from __future__ import annotations

import math
from enum import Enum

KMH_PER_MPH = 1.60934


class DisplayUnit(str, Enum):
    """Unit system used when formatting values for display."""

    IMPERIAL = "imperial"
    METRIC = "metric"

    def toggled(self) -> DisplayUnit:
        return DisplayUnit.METRIC if self is DisplayUnit.IMPERIAL else DisplayUnit.IMPERIAL


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def fahrenheit_to_celsius(value_f: float) -> float:
    return (value_f - 32) * 5 / 9


def mph_to_kmh(value_mph: float) -> float:
    return value_mph * KMH_PER_MPH


def to_display_temperature(value_f: float, unit: DisplayUnit) -> str:
    """Format a Fahrenheit value as a whole-degree string in the given unit."""
    if unit is DisplayUnit.METRIC:
        return f"{round_half_away_from_zero(fahrenheit_to_celsius(value_f))}°C"
    return f"{round_half_away_from_zero(value_f)}°F"


def to_display_wind_speed(value_mph: float, unit: DisplayUnit) -> str:
    """Format a mph value as a whole-number speed string in the given unit."""
    if unit is DisplayUnit.METRIC:
        return f"{round_half_away_from_zero(mph_to_kmh(value_mph))} km/h"
    return f"{round_half_away_from_zero(value_mph)} mph"


def to_display_percent(value: float) -> str:
    return f"{round_half_away_from_zero(value)}%"


def to_display_index(value: float) -> str:
    return str(round_half_away_from_zero(value))
