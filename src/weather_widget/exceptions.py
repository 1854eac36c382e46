"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class PreferenceStoreError(Exception):
    """Raised when the display-unit preference cannot be persisted."""


class WeatherLookupError(Exception):
    """Base class for failures that end a single location lookup."""

    default_user_message = "Something went wrong while looking up the weather."

    def __init__(self, message: str | None = None, *, user_message: str | None = None) -> None:
        super().__init__(message or user_message or self.default_user_message)
        self.user_message = user_message or self.default_user_message


class EmptyLocationError(WeatherLookupError):
    """Raised when a lookup is requested with an empty location string."""

    default_user_message = "Please enter a location."


class LocationNotFoundError(WeatherLookupError):
    """Raised when the provider cannot resolve the location query."""

    def __init__(self, location: str, message: str | None = None) -> None:
        super().__init__(message, user_message=f'Location "{location}" not found')
        self.location = location


class ProviderUnavailableError(WeatherLookupError):
    """Raised for transport, timeout and non-lookup HTTP failures."""

    default_user_message = "Weather service is unavailable. Please try again."

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedPayloadError(WeatherLookupError):
    """Raised when a provider response lacks the structure we read."""

    default_user_message = "Received an unexpected response from the weather service."
