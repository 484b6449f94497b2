import json
import logging

import structlog

from cqueue.config.logging import setup_logging
from cqueue.config.settings import settings


def _last_event(capsys) -> dict:
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    return json.loads(lines[-1])


def test_stdlib_extra_fields_are_rendered(monkeypatch, capsys):
    monkeypatch.setattr(settings, "debug", False)
    setup_logging("INFO")

    logging.getLogger("cqueue.v1.jobs.repository").info(
        "Job dequeued", extra={"job_id": 7}
    )

    event = _last_event(capsys)
    assert event["event"] == "Job dequeued"
    assert event["job_id"] == 7
    assert event["level"] == "info"
    assert event["logger"] == "cqueue.v1.jobs.repository"
    assert "timestamp" in event


def test_structlog_events_carry_request_context(monkeypatch, capsys):
    monkeypatch.setattr(settings, "debug", False)
    setup_logging("INFO")
    structlog.contextvars.bind_contextvars(request_id="abc-123")
    try:
        structlog.get_logger("cqueue.test").warning("Queue is empty", code=400)
    finally:
        structlog.contextvars.clear_contextvars()

    event = _last_event(capsys)
    assert event["event"] == "Queue is empty"
    assert event["request_id"] == "abc-123"
    assert event["code"] == 400


def test_repeated_setup_keeps_a_single_handler():
    setup_logging("INFO")
    setup_logging("DEBUG")

    ours = [h for h in logging.getLogger().handlers if h.get_name() == "cqueue"]
    assert len(ours) == 1
    assert logging.getLogger().level == logging.DEBUG
