"""Typed settings loader for the weather widget."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .units import DisplayUnit


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    visual_crossing_api_key: str = Field(alias="VISUAL_CROSSING_API_KEY", repr=False)
    visual_crossing_base_url: AnyUrl = Field(
        default=(
            "https://weather.visualcrossing.com"
            "/VisualCrossingWebServices/rest/services/timeline"
        ),
        alias="VISUAL_CROSSING_BASE_URL",
    )
    weather_timeout_seconds: float = Field(default=10.0, alias="WEATHER_TIMEOUT_SECONDS")
    preference_file: Path = Field(
        default=Path("./data/preferences.json"),
        alias="PREFERENCE_FILE",
    )
    default_display_unit: DisplayUnit = Field(
        default=DisplayUnit.IMPERIAL,
        alias="DEFAULT_DISPLAY_UNIT",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    @field_validator("default_display_unit", mode="before")
    @classmethod
    def lowercase_unit(cls, value: Any) -> Any:
        """Accept `METRIC` style env values."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_values(self) -> Settings:
        if not self.visual_crossing_api_key.strip():
            raise ValueError("VISUAL_CROSSING_API_KEY must not be empty.")
        if self.visual_crossing_base_url.scheme not in {"http", "https"}:
            raise ValueError("VISUAL_CROSSING_BASE_URL must be an http(s) URL.")
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        return self

    @property
    def log_level_no(self) -> int:
        return logging.getLevelName(self.log_level)

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "app_env": self.app_env,
            "base_url": str(self.visual_crossing_base_url),
            "timeout_seconds": self.weather_timeout_seconds,
            "preference_file": str(self.preference_file),
            "default_display_unit": self.default_display_unit.value,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc

    settings.preference_file.parent.mkdir(parents=True, exist_ok=True)
    return settings
