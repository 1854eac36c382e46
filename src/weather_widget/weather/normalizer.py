"""Projection of raw Visual Crossing timeline payloads into stable models.

This is the only module that knows provider field names. Every reader is
explicit about its fallback: required numbers raise, optional numbers default
to zero when absent, and present-but-wrong-typed values always raise instead of
being coerced.
"""

from __future__ import annotations

import math
from typing import Any

from ..exceptions import MalformedPayloadError
from .models import FORECAST_DAY_COUNT, CurrentConditions, ForecastDay, ForecastSet

_FIRST_FORECAST_INDEX = 1


def extract_current(raw: Any) -> CurrentConditions:
    """Build CurrentConditions from the payload's `currentConditions` object."""
    payload = _require_mapping(raw, "payload")
    current = payload.get("currentConditions")
    if not isinstance(current, dict):
        raise MalformedPayloadError("Weather payload missing 'currentConditions' object.")

    return CurrentConditions(
        location=_location_name(payload),
        temperature_f=_required_number(current, "temp", "currentConditions"),
        feels_like_f=_required_number(current, "feelslike", "currentConditions"),
        conditions_text=_optional_str(current.get("conditions")) or "",
        humidity_pct=_optional_number(current, "humidity", "currentConditions"),
        uv_index=_optional_number(current, "uvindex", "currentConditions"),
        wind_speed_mph=_optional_number(current, "windspeed", "currentConditions"),
        icon_code=_optional_str(current.get("icon")),
    )


def extract_forecast(raw: Any) -> ForecastSet:
    """Select days 1..3 of the payload's `days` list, skipping the request day."""
    payload = _require_mapping(raw, "payload")
    days = payload.get("days")
    if not isinstance(days, list):
        raise MalformedPayloadError("Weather payload missing 'days' list.")

    needed = _FIRST_FORECAST_INDEX + FORECAST_DAY_COUNT
    if len(days) < needed:
        raise MalformedPayloadError(
            f"Weather payload has {len(days)} day entries; at least {needed} are required."
        )

    selected = days[_FIRST_FORECAST_INDEX:needed]
    return ForecastSet(
        days=tuple(
            _extract_day(entry, index)
            for index, entry in enumerate(selected, start=_FIRST_FORECAST_INDEX)
        )
    )


def normalize(raw: Any) -> tuple[CurrentConditions, ForecastSet]:
    """Extract both current conditions and forecast from one payload."""
    return extract_current(raw), extract_forecast(raw)


def _extract_day(entry: Any, index: int) -> ForecastDay:
    context = f"days[{index}]"
    day = _require_mapping(entry, context)
    date_iso = _optional_str(day.get("datetime"))
    if date_iso is None:
        raise MalformedPayloadError(f"Weather payload {context} missing 'datetime'.")

    return ForecastDay(
        date_iso=date_iso,
        temp_max_f=_required_number(day, "tempmax", context),
        temp_min_f=_required_number(day, "tempmin", context),
        sunrise_local=_optional_str(day.get("sunrise")) or "",
        sunset_local=_optional_str(day.get("sunset")) or "",
        conditions_text=_optional_str(day.get("conditions")) or "",
        icon_code=_optional_str(day.get("icon")),
    )


def _location_name(payload: dict[str, Any]) -> str:
    return (
        _optional_str(payload.get("resolvedAddress"))
        or _optional_str(payload.get("address"))
        or ""
    )


def _require_mapping(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedPayloadError(
            f"Weather {context} has unexpected type {type(value).__name__}; expected object."
        )
    return value


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _required_number(source: dict[str, Any], key: str, context: str) -> float:
    value = source.get(key)
    if not _is_number(value):
        raise MalformedPayloadError(f"Weather payload {context}.{key} missing or not numeric.")
    return float(value)


def _optional_number(source: dict[str, Any], key: str, context: str) -> float:
    value = source.get(key)
    if value is None:
        return 0.0
    if not _is_number(value):
        raise MalformedPayloadError(
            f"Weather payload {context}.{key} has non-numeric value {value!r}."
        )
    return float(value)


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
