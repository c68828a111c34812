"""Structured logging for ground station events (subscribe, unsubscribe, deliver)."""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.WARNING

# Attributes every LogRecord has; anything else on a record came from extra={...}
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class EventFormatter(logging.Formatter):
    """Pipe-separated line format with the extra={...} fields appended as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        ]
        if not fields:
            return line
        head, sep, tail = line.partition("\n")
        return f"{head} | {' '.join(fields)}{sep}{tail}"


def resolve_level(value: str | None) -> int:
    """Map a level name such as "debug" or "INFO" to a logging level (INFO if unknown)."""
    if not value:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a configured logger; level defaults to SATCOM_LOG_LEVEL from the environment."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            EventFormatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
        if level is None:
            level = resolve_level(os.environ.get("SATCOM_LOG_LEVEL"))
        logger.setLevel(level)
    return logger
