from __future__ import annotations

import io
import json
import logging

from task_tracker.core.config import Settings
from task_tracker.core.context import bind_request_id, reset_request_id
from task_tracker.core.logging import JsonLogFormatter, configure_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.makeLogRecord(
        {"name": "task_tracker.tests", "levelno": logging.INFO, "levelname": "INFO", "msg": msg}
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_configure_logging_outputs_json_with_request_id() -> None:
    settings = Settings(environment="test")
    settings.log_level = "INFO"
    configure_logging(settings)

    root_logger = logging.getLogger()
    handler = next(
        (h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)),
        None,
    )
    assert handler is not None, "Expected JSON stream handler to be configured"

    buffer = io.StringIO()
    previous_stream = handler.setStream(buffer)

    token = bind_request_id("req-json-1")
    try:
        logger = logging.getLogger("task_tracker.tests.logging")
        logger.info("Task created", extra={"task_id": "abc123", "user_id": "u1"})
    finally:
        handler.flush()
        reset_request_id(token)
        handler.setStream(previous_stream)

    log_lines = buffer.getvalue().strip().splitlines()
    assert log_lines, "Expected structured log line to be captured"
    payload = json.loads(log_lines[-1])

    assert payload["message"] == "Task created"
    assert payload["request_id"] == "req-json-1"
    assert payload["environment"] == "test"
    assert payload["level"] == "INFO"
    assert payload["task_id"] == "abc123"
    assert payload["user_id"] == "u1"
    assert payload["service"] == settings.project_name
    assert "context" not in payload


def test_identity_fields_are_top_level_and_other_extras_grouped() -> None:
    formatter = JsonLogFormatter(service="tracker", environment="test")

    payload = json.loads(
        formatter.format(_record("Task assigned", task_id="t1", assignee_id="u2", path="/api/tasks"))
    )

    assert payload["task_id"] == "t1"
    assert payload["assignee_id"] == "u2"
    assert payload["context"] == {"path": "/api/tasks"}
    assert "taskName" not in payload.get("context", {})


def test_values_json_cannot_encode_are_stringified() -> None:
    formatter = JsonLogFormatter(service="tracker", environment="test")

    payload = json.loads(formatter.format(_record("odd extra", errors={1})))

    assert payload["service"] == "tracker"
    assert payload["request_id"] == "-"
    assert payload["context"] == {"errors": "{1}"}
