"""Logging setup for the weather widget shell."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .redaction import sanitize_for_logging, sanitize_text

# Attributes callers may attach via ``extra=`` that are copied into the JSON event.
CONTEXT_FIELDS = ("location", "provider", "unit", "generation", "request")


class JsonConsoleFormatter(logging.Formatter):
    """JSON formatter for structured console logs.

    Lookup context passed through ``extra`` (see CONTEXT_FIELDS) is emitted as
    top-level keys, redacted the same way as payloads.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                event[field] = sanitize_for_logging(value)
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str, ensure_ascii=False)


def setup_logger(name: str = "weather_widget", level: int = logging.INFO) -> logging.Logger:
    """Create the shell logger once; later calls return it unchanged apart from level."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
