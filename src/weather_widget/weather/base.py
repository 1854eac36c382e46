"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class WeatherProvider(ABC):
    """Base contract for providers that return one raw timeline payload per lookup."""

    @abstractmethod
    async def fetch_raw(self, location_query: str) -> dict[str, Any]:
        """Fetch the raw payload for a location query.

        Raises EmptyLocationError, LocationNotFoundError, ProviderUnavailableError
        or MalformedPayloadError.
        """

    @abstractmethod
    async def aclose(self) -> None:
        """Release provider resources."""
