"""Render-state machine for location lookups.

States: Idle -> Loading -> Populated | Failed. Only the most recent submit is
authoritative; a fetch that settles after a newer submit started is dropped.
The last successfully normalized result is cached so a unit toggle can
re-render without another network call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .exceptions import EmptyLocationError, WeatherLookupError
from .preferences import PreferenceStore
from .ui.base import View
from .ui.formatting import format_current, format_forecast
from .units import DisplayUnit
from .weather.base import WeatherProvider
from .weather.icons import theme_for
from .weather.models import CurrentConditions, ForecastSet
from .weather.normalizer import normalize


@dataclass(slots=True, frozen=True)
class Idle:
    pass


@dataclass(slots=True, frozen=True)
class Loading:
    location: str


@dataclass(slots=True, frozen=True)
class Populated:
    current: CurrentConditions
    forecast: ForecastSet


@dataclass(slots=True, frozen=True)
class Failed:
    message: str


RenderState = Idle | Loading | Populated | Failed


class RenderStateController:
    """Owns the render state, the display unit and the last-known-good result."""

    def __init__(
        self,
        *,
        provider: WeatherProvider,
        preferences: PreferenceStore,
        view: View,
        logger: logging.Logger,
    ) -> None:
        self.provider = provider
        self.preferences = preferences
        self.view = view
        self.logger = logger
        self._state: RenderState = Idle()
        self._unit = preferences.get()
        self._last_good: Populated | None = None
        self._generation = 0

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def unit(self) -> DisplayUnit:
        return self._unit

    @property
    def last_good(self) -> Populated | None:
        """Most recent successful result, kept even while Failed or Loading."""
        return self._last_good

    async def submit(self, location_text: str) -> RenderState:
        """Look up a location and drive the view through loading to a result.

        Raises EmptyLocationError without touching state or view when the
        location is blank. Lookup failures become the Failed state; they are
        not raised.
        """
        location = location_text.strip()
        if not location:
            raise EmptyLocationError("Submit called with an empty location.")

        self._generation += 1
        generation = self._generation
        context = {"location": location, "generation": generation}
        self._state = Loading(location=location)
        self.view.show_loading()

        try:
            raw = await self.provider.fetch_raw(location)
            current, forecast = normalize(raw)
        except WeatherLookupError as exc:
            if generation != self._generation:
                self.logger.info("Discarding superseded failure: %s", exc, extra=context)
                return self._state
            self.logger.warning("Weather lookup failed: %s", exc, extra=context)
            return self._fail(exc.user_message)
        except Exception:
            if generation != self._generation:
                self.logger.exception("Discarding superseded lookup error", extra=context)
                return self._state
            self.logger.exception("Unexpected error during weather lookup", extra=context)
            return self._fail(WeatherLookupError.default_user_message)

        if generation != self._generation:
            self.logger.info("Discarding superseded result", extra=context)
            return self._state

        populated = Populated(current=current, forecast=forecast)
        self._last_good = populated
        self._state = populated
        self.logger.info("Weather lookup resolved to %r", current.location, extra=context)
        self.render()
        return self._state

    def toggle_unit(self) -> DisplayUnit:
        """Flip and persist the display unit, re-rendering cached data if shown.

        The unit is only adopted once the preference store accepted it, so a
        PreferenceStoreError leaves both the controller and the view unchanged.
        """
        unit = self._unit.toggled()
        self.preferences.set(unit)
        self._unit = unit
        self.logger.info("Display unit changed", extra={"unit": unit.value})
        self.render()
        return self._unit

    def set_unit(self, unit: DisplayUnit) -> DisplayUnit:
        if unit is not self._unit:
            self.toggle_unit()
        return self._unit

    def _fail(self, message: str) -> RenderState:
        self._state = Failed(message=message)
        self.view.show_error(message)
        return self._state

    def render(self) -> None:
        """Push the Populated state to the view; no-op in any other state."""
        state = self._state
        if not isinstance(state, Populated):
            return
        self.view.show_populated(
            format_current(state.current, self._unit),
            format_forecast(state.forecast, self._unit),
            theme_for(state.current.icon_code),
        )
