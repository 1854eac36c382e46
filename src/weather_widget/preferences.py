"""Persistence for the user's display-unit preference."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .exceptions import PreferenceStoreError
from .units import DisplayUnit

PREFERENCE_KEY = "displayUnit"


class PreferenceStore(ABC):
    """Key-value store for the display unit, defaulting to imperial when unset."""

    @abstractmethod
    def get(self) -> DisplayUnit:
        """Return the stored unit, or the default when nothing is stored."""

    @abstractmethod
    def set(self, unit: DisplayUnit) -> None:
        """Persist the selected unit."""


class InMemoryPreferenceStore(PreferenceStore):
    """Process-local store, used when no preference file is configured."""

    def __init__(
        self,
        initial: DisplayUnit | None = None,
        default: DisplayUnit = DisplayUnit.IMPERIAL,
    ) -> None:
        self._unit = initial
        self.default = default

    def get(self) -> DisplayUnit:
        return self._unit or self.default

    def set(self, unit: DisplayUnit) -> None:
        self._unit = unit


class JsonFilePreferenceStore(PreferenceStore):
    """Stores preferences as a small JSON object on disk.

    Other keys in the file are preserved on write. A missing file, unreadable
    JSON, or an unknown unit value all read as "unset".
    """

    def __init__(
        self,
        path: Path,
        logger: logging.Logger,
        default: DisplayUnit = DisplayUnit.IMPERIAL,
    ) -> None:
        self.path = path
        self.logger = logger
        self.default = default

    def get(self) -> DisplayUnit:
        raw_value = self._read().get(PREFERENCE_KEY)
        if raw_value is None:
            return self.default
        try:
            return DisplayUnit(raw_value)
        except ValueError:
            self.logger.warning(
                "Ignoring unknown %s value %r in %s", PREFERENCE_KEY, raw_value, self.path
            )
            return self.default

    def set(self, unit: DisplayUnit) -> None:
        data = self._read()
        data[PREFERENCE_KEY] = unit.value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
                fh.write("\n")
        except OSError as exc:
            raise PreferenceStoreError(
                f"Failed writing preference file {self.path}: {exc}"
            ) from exc

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            self.logger.warning("Could not read preference file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            self.logger.warning("Preference file %s does not hold a JSON object", self.path)
            return {}
        return data
