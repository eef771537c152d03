"""JSON logging for the stylist with per-operation correlation ids.

Every record is rendered as one JSON object. Fields passed through
:func:`log_event` become top-level keys after PII scrubbing. A correlation id
lives only for the duration of a :func:`correlation_context` (or
:func:`operation_context`) block; outside such a block records carry ``null``.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import time
import uuid
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else on a record came in via ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}
_SENSITIVE_FIELDS = frozenset({"user_id", "email", "zip_code", "image_url", "notes", "api_key", "appid"})
_REDACTED = "[redacted]"
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")


def _mask_text(value: str) -> str:
    if value.lower().startswith(("http://", "https://")):
        return "[redacted-url]"
    return _EMAIL_PATTERN.sub("[redacted-email]", value)


def redact_for_log(value: Any) -> Any:
    """Scrub user ids, locations, image URLs and e-mail addresses from a log payload."""

    if isinstance(value, dict):
        return {key: _REDACTED if key in _SENSITIVE_FIELDS else redact_for_log(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in value]
    if isinstance(value, str):
        return _mask_text(value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return str(value)


class JsonFormatter(logging.Formatter):
    """Render a record, its ``extra`` fields and the active correlation id as JSON."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and key not in payload:
                payload[key] = redact_for_log(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Route the root logger through a single JSON stream handler."""

    desired_level = level or os.getenv("LOG_LEVEL", "INFO")
    if isinstance(desired_level, str):
        desired_level = desired_level.upper()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=desired_level, handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id to the block.

    An explicit id wins, then the id of an enclosing block, then a fresh one.
    The previous value is restored on exit, so ids never outlive their block.
    """

    scoped_id = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    token = CORRELATION_ID.set(scoped_id)
    try:
        yield scoped_id
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit ``event`` with scrubbed ``fields`` as structured attributes."""

    correlation_id = fields.pop("correlation_id", None) or CORRELATION_ID.get()
    exc_info = fields.pop("exc_info", None)
    extra = {key: value for key, value in redact_for_log(fields).items() if key not in _RECORD_ATTRIBUTES}
    extra.update(event=event, correlation_id=correlation_id)
    logger.log(level, event, exc_info=exc_info, extra=extra)


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None, **attributes: Any) -> Iterator[str]:
    """Run a named operation inside its own correlation scope and time it."""

    logger = logging.getLogger("stylist.operations")
    started = time.perf_counter()
    with correlation_context(correlation_id) as scoped_id:
        log_event(logger, logging.DEBUG, "operation_started", operation=name, **attributes)
        try:
            yield scoped_id
        finally:
            log_event(
                logger,
                logging.DEBUG,
                "operation_finished",
                operation=name,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
