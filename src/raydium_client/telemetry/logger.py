"""
Structured logging for raydium-client-python.

Every module logs through a child of the ``raydium_client`` logger. The
package installs only a NullHandler; applications opt in to output with
:func:`configure_logging`.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from enum import Enum
from typing import IO, Any

PACKAGE_LOGGER = "raydium_client"

# Keyword arguments consumed by logging itself rather than turned into fields
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_logging_level(self) -> int:
        return logging.getLevelName(self.value)


def _fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "fields", None) or {}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; structured fields sit at the top level."""

    def __init__(self, include_timestamp: bool = True) -> None:
        super().__init__()
        self._include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {}
        if self._include_timestamp:
            created = datetime.fromtimestamp(record.created, tz=timezone.utc)
            entry["timestamp"] = created.isoformat(timespec="milliseconds").replace(
                "+00:00", "Z"
            )
        entry["level"] = record.levelname
        entry["logger"] = record.name
        entry["message"] = record.getMessage()
        entry.update(_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``time level logger: message key=value ...``"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{key}={value}" for key, value in _fields(record).items())
        return f"{line} {pairs}" if pairs else line


class RaydiumLogger(logging.LoggerAdapter):
    """Logger adapter that turns keyword arguments into structured fields.

    Example:
        >>> logger = get_logger("raydium_client.transport.http")
        >>> logger.debug("Sending request", method="GET", url="https://...")
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        fields = {key: kwargs.pop(key) for key in list(kwargs) if key not in _LOGGING_KWARGS}
        extra = dict(kwargs.get("extra") or {})
        extra["fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs


def configure_logging(
    level: LogLevel = LogLevel.WARNING,
    format: str = "text",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Send package log records to a stream.

    Replaces any handler installed by an earlier call.

    Args:
        level: Minimum level emitted
        format: ``"json"`` or ``"text"``
        stream: Output stream (default: stderr)

    Returns:
        The installed handler
    """
    if format not in ("json", "text"):
        raise ValueError(f"Unknown log format: {format!r}")

    root = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(root.handlers):
        if not isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if format == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(level.to_logging_level())
    root.propagate = False
    return handler


def get_logger(name: str) -> RaydiumLogger:
    """Get a structured logger; ``name`` should live under ``raydium_client``."""
    return RaydiumLogger(logging.getLogger(name), {})


logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
