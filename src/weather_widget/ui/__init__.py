"""Presentation layer: view contract, formatting and the rich terminal view."""

from .base import View
from .formatting import format_current, format_forecast
from .models import FormattedCurrent, FormattedForecastDay
from .terminal_view import RichTerminalView

__all__ = [
    "FormattedCurrent",
    "FormattedForecastDay",
    "RichTerminalView",
    "View",
    "format_current",
    "format_forecast",
]
