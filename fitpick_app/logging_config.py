"""Structured logging helpers for the FitPick app.

Every record is emitted as one JSON object carrying the correlation id of the
request (or outfit generation) it belongs to. Location and photo details are
scrubbed before they reach a handler.
"""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses
import json
import logging
import os
import re
import time
import uuid
from enum import Enum
from typing import IO, Any, Dict, Iterator

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RESERVED_RECORD_KEYS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "taskName",
}
# Coordinates are kept at roughly city resolution so weather issues stay debuggable.
_COARSE_KEYS = {"latitude", "longitude", "lat", "lon"}
_COORDINATE_DECIMALS = 1
_REDACT_KEYS = {"image_path", "email"}
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")


class JsonFormatter(logging.Formatter):
    """Emit structured JSON logs with correlation metadata."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", record.getMessage()),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS and key not in payload
        }
        payload.update(redact_for_log(extras))
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None, stream: IO[str] | None = None) -> None:
    """Route the root logger through a single JSON handler."""

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def _redact_string(value: str) -> str:
    if _EMAIL_PATTERN.search(value):
        return _EMAIL_PATTERN.sub("[redacted-email]", value)
    lowered = value.lower()
    if lowered.startswith(("http://", "https://", "file://")):
        return "[redacted-url]"
    return value


def _coarsen(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return round(float(value), _COORDINATE_DECIMALS)
    return "[redacted]"


def redact_for_log(payload: Any) -> Any:
    """Recursively scrub photo paths, emails and URLs, and coarsen coordinates."""

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _redact_string(payload)
    if isinstance(payload, Enum):
        return redact_for_log(payload.value)
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        # Garments carry their photo path; scrub them field by field.
        return redact_for_log(dataclasses.asdict(payload))
    if isinstance(payload, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, dict):
        scrubbed: Dict[str, Any] = {}
        for key, value in payload.items():
            if key in _REDACT_KEYS:
                scrubbed[key] = "[redacted]"
            elif key in _COARSE_KEYS:
                scrubbed[key] = _coarsen(value)
            else:
                scrubbed[str(key)] = redact_for_log(value)
        return scrubbed
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring JSON output on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return the active correlation id, assigning one if needed."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    new_id = uuid.uuid4().hex
    CORRELATION_ID.set(new_id)
    return new_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Temporarily bind a correlation id to the current context."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit a structured log entry with correlation metadata."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id around a named operation and log how it ended.

    A caller that already has a correlation id keeps it; otherwise a fresh one
    is minted for the operation.
    """

    logger = logging.getLogger(__name__)
    with correlation_context(correlation_id or CORRELATION_ID.get()) as scoped_id:
        start = time.perf_counter()
        try:
            yield scoped_id
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "operation_failed",
                operation=name,
                error=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        log_event(
            logger,
            logging.DEBUG,
            "operation_completed",
            operation=name,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
    "operation_context",
]
