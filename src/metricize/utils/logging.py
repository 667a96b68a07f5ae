"""JSON Lines logging for conversion runs.

Every record carries ``event`` (a dotted name such as
``dimensions.conversion_failed``), the emitting ``logger`` and a ``trace_id``
shared by the events of one run. Keyword fields passed to :func:`log_event`
are merged into the payload.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping
from uuid import uuid4

__all__ = [
    "LOGGER_NAME",
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
    "resolve_level",
]

LOGGER_NAME = "metricize"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: int | str) -> int:
    """Return the numeric level for ``level`` (``"warning"``, ``30``, ...)."""

    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in _LEVEL_NAMES:
        raise ValueError(f"Invalid log level: {level!r}")
    return getattr(logging, name)


def _utc_timestamp(created: float) -> str:
    stamp = datetime.fromtimestamp(created, tz=timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


class JsonLogFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        event = getattr(record, "event", None) or message
        payload: Dict[str, Any] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": event,
        }
        if message != event:
            payload["message"] = message

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id

        fields = getattr(record, "extra_fields", None)
        if isinstance(fields, Mapping):
            payload.update(fields)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_json_logger(
    log_path: Path | None,
    level: int | str = logging.INFO,
    *,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """Point the ``metricize`` logger at ``log_path``.

    Previous handlers are closed, so repeated CLI invocations in one process
    never write twice. Without ``log_path`` the records are dropped.
    """

    numeric_level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_path is None:
        handler = logging.NullHandler()
    else:
        target = Path(log_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    handler.setLevel(numeric_level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Log ``event`` with ``fields`` and return the trace id it was tagged with."""

    event_trace_id = trace_id or generate_trace_id()
    logger.log(
        level,
        message or event,
        extra={"trace_id": event_trace_id, "event": event, "extra_fields": fields},
    )
    return event_trace_id
