"""Tests for display-unit preference persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from weather_widget.exceptions import PreferenceStoreError
from weather_widget.preferences import (
    PREFERENCE_KEY,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
)
from weather_widget.units import DisplayUnit


def _make_store(path: Path, **kwargs: object) -> JsonFilePreferenceStore:
    return JsonFilePreferenceStore(path, logger=logging.getLogger("test_preferences"), **kwargs)


def test_in_memory_store_defaults_to_imperial() -> None:
    store = InMemoryPreferenceStore()
    assert store.get() is DisplayUnit.IMPERIAL
    store.set(DisplayUnit.METRIC)
    assert store.get() is DisplayUnit.METRIC


def test_file_store_defaults_when_file_missing(tmp_path: Path) -> None:
    store = _make_store(tmp_path / "prefs.json")
    assert store.get() is DisplayUnit.IMPERIAL


def test_file_store_respects_configured_default(tmp_path: Path) -> None:
    store = _make_store(tmp_path / "prefs.json", default=DisplayUnit.METRIC)
    assert store.get() is DisplayUnit.METRIC


def test_file_store_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "prefs.json"
    _make_store(path).set(DisplayUnit.METRIC)

    assert json.loads(path.read_text(encoding="utf-8")) == {PREFERENCE_KEY: "metric"}
    assert _make_store(path).get() is DisplayUnit.METRIC


def test_file_store_preserves_unrelated_keys(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    _make_store(path).set(DisplayUnit.METRIC)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "theme": "dark",
        PREFERENCE_KEY: "metric",
    }


@pytest.mark.parametrize(
    "contents",
    ["not json", json.dumps(["metric"]), json.dumps({PREFERENCE_KEY: "kelvin"})],
)
def test_file_store_treats_garbage_as_unset(
    tmp_path: Path, contents: str, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(contents, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="test_preferences"):
        assert _make_store(path).get() is DisplayUnit.IMPERIAL
    assert caplog.records


def test_file_store_write_failure_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = _make_store(blocker / "prefs.json")
    with pytest.raises(PreferenceStoreError, match="Failed writing preference file"):
        store.set(DisplayUnit.METRIC)
