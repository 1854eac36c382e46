"""Provider icon codes mapped to display glyphs and visual themes.

Codes are Visual Crossing's default "icons1" set.
"""

from __future__ import annotations

from enum import Enum


class IconCode(str, Enum):
    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SHOWERS = "showers"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    WIND = "wind"
    FOG = "fog"


class ThemeName(str, Enum):
    SUNNY = "sunny"
    NIGHT = "night"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    STORMY = "stormy"
    SNOWY = "snowy"
    FOGGY = "foggy"


FALLBACK_GLYPH = "🌡️"
FALLBACK_THEME = ThemeName.SUNNY

GLYPHS: dict[IconCode, str] = {
    IconCode.CLEAR_DAY: "☀️",
    IconCode.CLEAR_NIGHT: "🌙",
    IconCode.PARTLY_CLOUDY_DAY: "⛅",
    IconCode.PARTLY_CLOUDY_NIGHT: "☁️",
    IconCode.CLOUDY: "☁️",
    IconCode.RAIN: "🌧️",
    IconCode.SHOWERS: "🌦️",
    IconCode.THUNDERSTORM: "⛈️",
    IconCode.SNOW: "❄️",
    IconCode.WIND: "💨",
    IconCode.FOG: "🌫️",
}

THEMES: dict[IconCode, ThemeName] = {
    IconCode.CLEAR_DAY: ThemeName.SUNNY,
    IconCode.CLEAR_NIGHT: ThemeName.NIGHT,
    IconCode.PARTLY_CLOUDY_DAY: ThemeName.CLOUDY,
    IconCode.PARTLY_CLOUDY_NIGHT: ThemeName.NIGHT,
    IconCode.CLOUDY: ThemeName.CLOUDY,
    IconCode.RAIN: ThemeName.RAINY,
    IconCode.SHOWERS: ThemeName.RAINY,
    IconCode.THUNDERSTORM: ThemeName.STORMY,
    IconCode.SNOW: ThemeName.SNOWY,
    IconCode.WIND: ThemeName.CLOUDY,
    IconCode.FOG: ThemeName.FOGGY,
}


def parse_icon_code(icon_code: str | None) -> IconCode | None:
    """Return the matching IconCode, or None for absent/unrecognized codes."""
    if icon_code is None:
        return None
    try:
        return IconCode(icon_code.strip().lower())
    except ValueError:
        return None


def glyph_for(icon_code: str | None) -> str:
    code = parse_icon_code(icon_code)
    if code is None:
        return FALLBACK_GLYPH
    return GLYPHS[code]


def theme_for(icon_code: str | None) -> ThemeName:
    code = parse_icon_code(icon_code)
    if code is None:
        return FALLBACK_THEME
    return THEMES[code]
