"""Logging helpers shared by the compiler and the command line checker.

The library never configures logging on import; callers (or the CLI) opt in
through configure_logging. Structured fields travel on the LogRecord via
``extra=extra_context(...)`` so handlers can pick them up.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from ..constants import Constants


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with the project log format.

    Args:
        level: Level name; falls back to the NPMREQ_LOG_LEVEL environment
            variable and then to Constants.DEFAULT_LOG_LEVEL.
    """
    name = level or os.environ.get(Constants.LOG_LEVEL_ENV) or Constants.DEFAULT_LOG_LEVEL
    numeric = getattr(logging, str(name).upper(), None)
    if not isinstance(numeric, int):
        numeric = getattr(logging, Constants.DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=numeric, format=Constants.LOG_FORMAT, force=True)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in fields.items() if value is not None}


class Timer:
    """Context manager measuring wall-clock duration in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
