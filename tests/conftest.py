"""Shared payload builders for weather widget tests."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import pytest

_BASE_PAYLOAD: dict[str, Any] = {
    "resolvedAddress": "London, England, United Kingdom",
    "address": "london",
    "currentConditions": {
        "temp": 59.4,
        "feelslike": 57.6,
        "conditions": "Partially cloudy",
        "humidity": 71.2,
        "uvindex": 3,
        "windspeed": 10.1,
        "icon": "partly-cloudy-day",
    },
    "days": [
        {
            "datetime": "2026-10-19",
            "tempmax": 61.0,
            "tempmin": 50.2,
            "sunrise": "07:25:31",
            "sunset": "17:55:02",
            "conditions": "Rain, Partially cloudy",
            "icon": "rain",
        },
        {
            "datetime": "2026-10-20",
            "tempmax": 60.1,
            "tempmin": 48.9,
            "sunrise": "07:27:12",
            "sunset": "17:52:50",
            "conditions": "Clear",
            "icon": "clear-day",
        },
        {
            "datetime": "2026-10-21",
            "tempmax": 57.3,
            "tempmin": 46.0,
            "sunrise": "07:28:54",
            "sunset": "17:50:40",
            "conditions": "Rain",
            "icon": "showers",
        },
        {
            "datetime": "2026-10-22",
            "tempmax": 55.8,
            "tempmin": 44.4,
            "sunrise": "07:30:36",
            "sunset": "17:48:31",
            "conditions": "Snow",
            "icon": "snow",
        },
        {
            "datetime": "2026-10-23",
            "tempmax": 54.0,
            "tempmin": 43.1,
            "sunrise": "07:32:18",
            "sunset": "17:46:24",
            "conditions": "Overcast",
            "icon": "cloudy",
        },
    ],
}


def build_payload(**overrides: Any) -> dict[str, Any]:
    """Return a fresh Visual Crossing style payload with top-level overrides."""
    payload = copy.deepcopy(_BASE_PAYLOAD)
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    return build_payload
