"""Tests for projecting raw provider payloads into canonical models."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from pydantic import ValidationError

from weather_widget.exceptions import MalformedPayloadError
from weather_widget.weather.models import ForecastDay, ForecastSet
from weather_widget.weather.normalizer import extract_current, extract_forecast, normalize

PayloadFactory = Callable[..., dict[str, Any]]


def test_extract_current_projects_documented_fields(make_payload: PayloadFactory) -> None:
    current = extract_current(make_payload())

    assert current.location == "London, England, United Kingdom"
    assert current.temperature_f == 59.4
    assert current.feels_like_f == 57.6
    assert current.conditions_text == "Partially cloudy"
    assert current.humidity_pct == 71.2
    assert current.uv_index == 3.0
    assert current.wind_speed_mph == 10.1
    assert current.icon_code == "partly-cloudy-day"


def test_extract_current_missing_current_conditions_raises(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    del payload["currentConditions"]
    with pytest.raises(MalformedPayloadError, match="currentConditions"):
        extract_current(payload)


def test_extract_current_non_object_current_conditions_raises(
    make_payload: PayloadFactory,
) -> None:
    with pytest.raises(MalformedPayloadError):
        extract_current(make_payload(currentConditions=["not", "an", "object"]))


def test_missing_icon_is_absent_not_error(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    del payload["currentConditions"]["icon"]
    assert extract_current(payload).icon_code is None


def test_optional_numbers_default_to_zero_when_absent(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    payload["currentConditions"]["uvindex"] = None
    del payload["currentConditions"]["windspeed"]
    current = extract_current(payload)
    assert current.uv_index == 0.0
    assert current.wind_speed_mph == 0.0


@pytest.mark.parametrize("bad_value", ["10", True, float("nan"), {"value": 3}])
def test_non_numeric_optional_value_is_not_coerced(
    make_payload: PayloadFactory, bad_value: Any
) -> None:
    payload = make_payload()
    payload["currentConditions"]["humidity"] = bad_value
    with pytest.raises(MalformedPayloadError, match="humidity"):
        extract_current(payload)


def test_missing_temperature_raises(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    del payload["currentConditions"]["temp"]
    with pytest.raises(MalformedPayloadError, match="temp"):
        extract_current(payload)


def test_location_falls_back_to_address(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    del payload["resolvedAddress"]
    assert extract_current(payload).location == "london"


def test_extract_forecast_returns_days_one_to_three_in_order(
    make_payload: PayloadFactory,
) -> None:
    forecast = extract_forecast(make_payload())

    assert len(forecast.days) == 3
    assert [day.date_iso for day in forecast.days] == ["2026-10-20", "2026-10-21", "2026-10-22"]
    first = forecast.days[0]
    assert first.temp_max_f == 60.1
    assert first.temp_min_f == 48.9
    assert first.sunrise_local == "07:27:12"
    assert first.sunset_local == "17:52:50"
    assert first.conditions_text == "Clear"
    assert first.icon_code == "clear-day"


def test_extract_forecast_with_exactly_four_days(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    payload["days"] = payload["days"][:4]
    forecast = extract_forecast(payload)
    assert forecast.days[-1].date_iso == "2026-10-22"


def test_extract_forecast_with_too_few_days_raises(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    payload["days"] = payload["days"][:3]
    with pytest.raises(MalformedPayloadError, match="at least 4"):
        extract_forecast(payload)


def test_extract_forecast_missing_days_raises(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    del payload["days"]
    with pytest.raises(MalformedPayloadError, match="'days' list"):
        extract_forecast(payload)


def test_extract_forecast_non_object_day_raises(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    payload["days"][2] = "garbage"
    with pytest.raises(MalformedPayloadError, match=r"days\[2\]"):
        extract_forecast(payload)


def test_extract_forecast_ignores_request_day_problems(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    payload["days"][0] = {"datetime": "2026-10-19"}
    assert len(extract_forecast(payload).days) == 3


def test_forecast_day_optional_fields_default(make_payload: PayloadFactory) -> None:
    payload = make_payload()
    for key in ("sunrise", "sunset", "conditions", "icon"):
        del payload["days"][1][key]
    day = extract_forecast(payload).days[0]
    assert day.sunrise_local == ""
    assert day.sunset_local == ""
    assert day.conditions_text == ""
    assert day.icon_code is None


def test_non_object_payload_raises() -> None:
    with pytest.raises(MalformedPayloadError, match="expected object"):
        normalize([{"currentConditions": {}}])


def test_normalize_returns_both_parts(make_payload: PayloadFactory) -> None:
    current, forecast = normalize(make_payload())
    assert current.location.startswith("London")
    assert len(forecast.days) == 3


def test_models_are_immutable(make_payload: PayloadFactory) -> None:
    current = extract_current(make_payload())
    with pytest.raises(ValidationError):
        current.temperature_f = 0.0  # type: ignore[misc]


def test_forecast_set_requires_three_days() -> None:
    day = ForecastDay(date_iso="2026-10-20", temp_max_f=60.0, temp_min_f=50.0)
    with pytest.raises(ValidationError, match="exactly 3"):
        ForecastSet(days=(day, day))
