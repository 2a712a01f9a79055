"""JSON logging for engine operations.

Every record carries the correlation id and the name of the engine operation
it was emitted under. Location fields are masked wherever they appear, and
wardrobe and weather objects are reduced to the fields an operator needs to
follow a request.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator, Optional

from models.outfit import OutfitRecommendation
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)
OPERATION: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("operation", default=None)

REDACTED = "[redacted]"
LOCATION_KEYS = frozenset({"location", "latitude", "longitude", "coordinates", "user_id", "image_url"})
MAX_LOGGED_ITEMS = 10

# Attributes every LogRecord has; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {"message", "asctime"}


def redact_for_log(value: Any) -> Any:
    """Return a JSON-safe copy of ``value`` with location fields masked.

    Wardrobe items log as their id and category, weather snapshots as their
    condition and temperature, recommendations as id and score. Long lists are
    cut to ``MAX_LOGGED_ITEMS`` entries plus a count.
    """

    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, WardrobeItem):
        return {"item_id": value.item_id, "category": value.category}
    if isinstance(value, WeatherCondition):
        return {"condition": value.condition, "temperature": value.temperature}
    if isinstance(value, OutfitRecommendation):
        return {"id": value.outfit_id, "score": round(value.score, 2)}
    if isinstance(value, dict):
        return {
            key: REDACTED if key in LOCATION_KEYS else redact_for_log(entry) for key, entry in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        entries = [redact_for_log(entry) for entry in list(value)[:MAX_LOGGED_ITEMS]]
        if len(value) > MAX_LOGGED_ITEMS:
            entries.append(f"... {len(value) - MAX_LOGGED_ITEMS} more")
        return entries
    return str(value)


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", record.getMessage()),
            "operation": getattr(record, "operation", None) or OPERATION.get(),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS and key not in payload}
        payload.update(redact_for_log(extras))
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Send root logging through a single JSON stream handler."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def current_correlation_id() -> Optional[str]:
    return CORRELATION_ID.get()


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id, reusing the enclosing one or minting a fresh id."""

    scoped_id = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    token = CORRELATION_ID.set(scoped_id)
    try:
        yield scoped_id
    finally:
        CORRELATION_ID.reset(token)


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Tag every record emitted inside the block with ``name`` and a correlation id."""

    token = OPERATION.set(name)
    try:
        with correlation_context(correlation_id) as scoped_id:
            yield scoped_id
    finally:
        OPERATION.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with structured fields; ``exc_info`` is passed through."""

    exc_info = fields.pop("exc_info", None)
    correlation_id = fields.pop("correlation_id", None) or CORRELATION_ID.get()
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "current_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
