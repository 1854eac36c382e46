"""Visual Crossing Timeline API weather provider."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..config import Settings
from ..exceptions import (
    EmptyLocationError,
    LocationNotFoundError,
    MalformedPayloadError,
    ProviderUnavailableError,
)
from ..redaction import sanitize_text
from .base import WeatherProvider

# Visual Crossing answers unresolvable locations with 400 "Invalid location".
_NOT_FOUND_STATUSES = frozenset({400, 404})


class VisualCrossingProvider(WeatherProvider):
    """Fetches raw current-conditions + daily timeline payloads, one attempt per lookup."""

    provider_name = "visual_crossing"

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._base_url = str(settings.visual_crossing_base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=settings.weather_timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> VisualCrossingProvider:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def build_url(self, location_query: str) -> str:
        return f"{self._base_url}/{quote(location_query, safe='')}"

    def build_params(self) -> dict[str, str]:
        return {
            "key": self.settings.visual_crossing_api_key,
            "unitGroup": "us",
            "include": "current,days",
            "contentType": "json",
        }

    async def fetch_raw(self, location_query: str) -> dict[str, Any]:
        """Fetch the timeline payload for a free-text location."""
        location = location_query.strip()
        if not location:
            raise EmptyLocationError("Location query must not be empty.")

        url = self.build_url(location)
        params = self.build_params()
        context = {"provider": self.provider_name, "location": location}
        self.logger.info("Fetching weather", extra=context)
        self.logger.debug(
            "Weather request prepared",
            extra={**context, "request": {"url": url, "params": params}},
        )
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = sanitize_text(exc.response.text[:300])
            if status in _NOT_FOUND_STATUSES:
                raise LocationNotFoundError(
                    location,
                    f"Visual Crossing could not resolve {location!r} (HTTP {status}): {detail}",
                ) from exc
            raise ProviderUnavailableError(
                f"Visual Crossing request failed with status {status}: {detail}",
                status_code=status,
            ) from exc
        except httpx.TimeoutException as exc:
            raise ProviderUnavailableError(
                f"Visual Crossing request timed out after "
                f"{self.settings.weather_timeout_seconds:g}s."
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(
                f"Visual Crossing request failed ({type(exc).__name__}): "
                f"{sanitize_text(str(exc))}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedPayloadError("Visual Crossing returned a non-JSON response.") from exc

        if not isinstance(payload, dict):
            raise MalformedPayloadError(
                f"Visual Crossing returned unexpected payload type {type(payload).__name__}."
            )
        self.logger.debug(
            "Location resolved to %r",
            payload.get("resolvedAddress"),
            extra=context,
        )
        return payload
