"""Centralized logging configuration with JSON-formatted extras."""

import json
import logging
import sys
from typing import TextIO

from safari_index.config import get_settings

PACKAGE_LOGGER = "safari_index"


class JSONExtrasFormatter(logging.Formatter):
    """Formatter that outputs a readable log line with extras as JSON.

    Extras are serialized with sorted keys, so the same event always renders
    the same line.

    Output format:
        2024-01-15 10:30:45 | DEBUG    | safari_index.services.internal_links | Related decisions ranked {"candidates": 7, "returned": 6, "topic_id": "tz-feb"}
    """

    RESERVED_ATTRS = frozenset(
        {
            "args",
            "asctime",
            "created",
            "exc_info",
            "exc_text",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "message",
            "module",
            "msecs",
            "msg",
            "name",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "stack_info",
            "taskName",
            "thread",
            "threadName",
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # Build the base message
        record.message = record.getMessage()
        timestamp = self.formatTime(record, self.datefmt)
        base = f"{timestamp} | {record.levelname:<8} | {record.name} | {record.message}"

        # Collect extras (anything not in the reserved set)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.RESERVED_ATTRS and not key.startswith("_")
        }

        if extras:
            try:
                extras_str = json.dumps(extras, default=str, ensure_ascii=False, sort_keys=True)
                base = f"{base} {extras_str}"
            except (TypeError, ValueError):
                pass

        # Append exception info if present
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            base = f"{base}\n{record.exc_text}"

        return base


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (or the configured ``log_level``) to its number, INFO if unknown."""
    resolved = logging.getLevelName((level or get_settings().log_level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Configure the package logger with console output and JSON extras.

    Args:
        level: Level name; defaults to the configured ``log_level``
        stream: Output stream for the handler; defaults to stdout

    Returns:
        The configured ``safari_index`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_log_level(level))

    # Avoid adding duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(JSONExtrasFormatter(datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)

    # Prevent propagation to root logger (avoid duplicate output)
    logger.propagate = False
    return logger
