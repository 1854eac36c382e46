"""Weather provider integration, payload normalization and icon themes."""

from .base import WeatherProvider
from .icons import IconCode, ThemeName, glyph_for, theme_for
from .models import CurrentConditions, ForecastDay, ForecastSet
from .normalizer import extract_current, extract_forecast, normalize
from .visual_crossing import VisualCrossingProvider

__all__ = [
    "CurrentConditions",
    "ForecastDay",
    "ForecastSet",
    "IconCode",
    "ThemeName",
    "VisualCrossingProvider",
    "WeatherProvider",
    "extract_current",
    "extract_forecast",
    "glyph_for",
    "normalize",
    "theme_for",
]
