"""Rich-rendered terminal view for the weather widget."""

from __future__ import annotations

import logging
from collections import deque

from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..redaction import sanitize_text
from ..weather.icons import ThemeName
from .base import View
from .models import FormattedCurrent, FormattedForecastDay

THEME_STYLES: dict[ThemeName, str] = {
    ThemeName.SUNNY: "yellow",
    ThemeName.NIGHT: "blue",
    ThemeName.CLOUDY: "white",
    ThemeName.RAINY: "cyan",
    ThemeName.STORMY: "magenta",
    ThemeName.SNOWY: "bright_white",
    ThemeName.FOGGY: "grey62",
}

_LEVEL_STYLES = {
    "INFO": "dim",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _NoticeLogHandler(logging.Handler):
    """Route logger output into the view's notice line instead of JSON lines."""

    def __init__(self, view: RichTerminalView) -> None:
        super().__init__(level=logging.WARNING)
        self.view = view

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = sanitize_text(record.getMessage())
            location = getattr(record, "location", None)
            if location:
                message = f"{location}: {message}"
            self.view.record_notice(record.levelname, message)
        except Exception:
            self.handleError(record)


class RichTerminalView(View):
    """Prints one panel group per render instruction."""

    def __init__(self, *, console: Console, max_notices: int = 3) -> None:
        self.console = console
        self.notices: deque[tuple[str, str]] = deque(maxlen=max_notices)
        self._logger: logging.Logger | None = None
        self._original_handlers: list[logging.Handler] = []

    def attach_logger(self, logger: logging.Logger) -> None:
        """Replace the JSON console handler with the notice feed while interactive."""
        self._logger = logger
        self._original_handlers = list(logger.handlers)
        logger.handlers = [_NoticeLogHandler(self)]

    def detach_logger(self) -> None:
        """Restore original logger handlers."""
        if self._logger is None:
            return
        self._logger.handlers = self._original_handlers
        self._logger = None
        self._original_handlers = []

    def record_notice(self, level: str, message: str) -> None:
        self.notices.append((level, message))

    def show_loading(self) -> None:
        skeleton = Table.grid(padding=(0, 1))
        skeleton.add_column(style="bold")
        skeleton.add_column(style="dim")
        for label in ("Temperature", "Feels Like", "Conditions", "Humidity", "UV Index", "Wind"):
            skeleton.add_row(label, "···")
        self.console.print(
            Panel(skeleton, title="Loading weather…", border_style="dim"),
        )

    def show_populated(
        self,
        current: FormattedCurrent,
        forecast: list[FormattedForecastDay],
        theme: ThemeName,
    ) -> None:
        style = THEME_STYLES.get(theme, "white")
        current_panel = self._build_current_panel(current, style)
        forecast_panel = self._build_forecast_panel(forecast, style)
        parts: list[Panel | Columns] = []
        if self.console.width < 100:
            parts.extend([current_panel, forecast_panel])
        else:
            parts.append(Columns([current_panel, forecast_panel], expand=True))
        notice_panel = self._build_notice_panel()
        if notice_panel is not None:
            parts.append(notice_panel)
        self.console.print(Group(*parts))

    def show_error(self, message: str) -> None:
        self.console.print(
            Panel(Text(message, style="bold red"), title="Error", border_style="red")
        )

    def _build_current_panel(self, current: FormattedCurrent, style: str) -> Panel:
        table = Table.grid(padding=(0, 1))
        table.add_column(style="bold")
        table.add_column(justify="right")
        table.add_row("Temperature", current.temperature)
        table.add_row("Feels Like", current.feels_like)
        table.add_row("Conditions", f"{current.glyph} {current.conditions}".strip())
        table.add_row("Humidity", current.humidity)
        table.add_row("UV Index", current.uv_index)
        table.add_row("Wind", current.wind_speed)
        return Panel(table, title=current.location or "Current Weather", border_style=style)

    def _build_forecast_panel(self, forecast: list[FormattedForecastDay], style: str) -> Panel:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Day", no_wrap=True)
        table.add_column("High", justify="right")
        table.add_column("Low", justify="right")
        table.add_column("Conditions", overflow="fold")
        table.add_column("Sunrise")
        table.add_column("Sunset")
        for day in forecast:
            table.add_row(
                day.date_label,
                day.temp_high,
                day.temp_low,
                f"{day.glyph} {day.conditions}".strip(),
                day.sunrise or "-",
                day.sunset or "-",
            )
        return Panel(table, title="Next 3 Days", border_style=style)

    def _build_notice_panel(self) -> Panel | None:
        if not self.notices:
            return None
        text = Text()
        for index, (level, message) in enumerate(self.notices):
            if index:
                text.append("\n")
            text.append(f"{level}: {message}", style=_LEVEL_STYLES.get(level, "white"))
        return Panel(text, title="Notices", border_style="yellow")
