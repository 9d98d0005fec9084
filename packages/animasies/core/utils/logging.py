"""Logging setup for Animasies.

Root logging goes to stdout or a file, as plain text or one JSON object
per line. Curve generators report their run time on a dedicated logger.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from datetime import UTC, datetime
from typing import Any

CURVES_LOGGER_NAME = "ANIMASIES_CURVES"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as ``{"level", "message", "timestamp", "context"}``.

    ``context`` names the emitting logger and call site, carries any
    ``extra`` fields, and describes the exception when one is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": self._context(record),
        }
        return json.dumps(entry, default=str)

    def _context(self, record: logging.LogRecord) -> dict[str, Any]:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, _ = record.exc_info
            context["error_type"] = exc_type.__name__
            context["error_message"] = str(exc)
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)
        return context


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Replace the root handlers with a single stdout or file handler.

    Args:
        level: Level name, case-insensitive.
        format_string: Text format; ignored when ``structured`` is set.
        filename: Log file path. Logs go to stdout when omitted.
        structured: Emit JSON lines instead of text.
    """
    handler = logging.FileHandler(filename) if filename else logging.StreamHandler(sys.stdout)
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_LOG_FORMAT))

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def get_curves_logger() -> logging.Logger:
    """Get the curve generation timing logger."""
    return logging.getLogger(CURVES_LOGGER_NAME)


def log_performance(func):
    """Report each call's wall-clock time at DEBUG on the curves logger."""

    @functools.wraps(func)
    def timed(*args, **kwargs):
        started = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - started
        get_curves_logger().debug(f"{func.__name__} finished in {elapsed:.4f}s")
        return result

    return timed
