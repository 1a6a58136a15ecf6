"""Logging configuration helpers for the DASS-21 client."""

from __future__ import annotations

import logging
from logging import Logger
import os

LOG_LEVEL_ENV = "LOG_LEVEL"


def resolve_level(name: str | None) -> int:
    """Map a level name to its numeric value; unknown or empty names mean INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None) -> Logger:
    """Configure basic logging for the application and return the package logger."""
    logging.basicConfig(
        level=resolve_level(level or os.getenv(LOG_LEVEL_ENV)),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # httpx logs every request at INFO; keep it quieter than the app.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger("dass_app")
