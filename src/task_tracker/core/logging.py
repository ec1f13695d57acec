"""JSON logging for the task tracker.

Every line carries the service, environment and request id. The actor and
subject of an operation (``user_id``, ``task_id``, ``assignee_id``) are
promoted to top-level keys so log queries can filter on them directly; any
other ``extra=`` values are grouped under ``context``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import get_request_id

IDENTITY_FIELDS = ("user_id", "task_id", "assignee_id")

_STANDARD_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "request_id"}


class JsonLogFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def __init__(self, *, service: str, environment: str) -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
            "environment": self._environment,
            "request_id": getattr(record, "request_id", get_request_id()),
        }

        context: dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in _STANDARD_RECORD_ATTRS:
                continue
            if key in IDENTITY_FIELDS:
                payload[key] = None if value is None else str(value)
            else:
                context[key] = value
        if context:
            payload["context"] = context

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class RequestContextFilter(logging.Filter):
    """Stamp records with the request id bound by ``CorrelationIdMiddleware``."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        return True


def configure_logging(settings: Settings) -> None:
    """Route the root logger, and through it uvicorn's, to a JSON stdout handler."""

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonLogFormatter,
                    "service": settings.project_name,
                    "environment": settings.environment,
                }
            },
            "filters": {"request_context": {"()": RequestContextFilter}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                    "filters": ["request_context"],
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
        }
    )


__all__ = ["IDENTITY_FIELDS", "JsonLogFormatter", "RequestContextFilter", "configure_logging"]
