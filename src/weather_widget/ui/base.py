"""Presentation contract driven by the render-state controller."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..weather.icons import ThemeName
from .models import FormattedCurrent, FormattedForecastDay


class View(ABC):
    """Accepts render instructions; owns all layout and styling."""

    @abstractmethod
    def show_loading(self) -> None:
        """Show the loading skeleton, hiding any previous result or error."""

    @abstractmethod
    def show_populated(
        self,
        current: FormattedCurrent,
        forecast: list[FormattedForecastDay],
        theme: ThemeName,
    ) -> None:
        """Show formatted current conditions and forecast under a theme."""

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Hide loading state and show a user-facing error message."""
