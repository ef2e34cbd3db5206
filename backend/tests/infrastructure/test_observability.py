"""Structured logging — JSON formatter output shape."""

import json
import logging
import uuid

from shopping_mall.infrastructure.observability import JSONFormatter


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "shopping_mall.services.lifecycle", logging.INFO, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_core_fields_present():
    line = json.loads(JSONFormatter().format(_record("Created Cart")))

    assert line["level"] == "INFO"
    assert line["logger"] == "shopping_mall.services.lifecycle"
    assert line["message"] == "Created Cart"
    assert "timestamp" in line


def test_known_extras_are_surfaced():
    rid = uuid.UUID(int=7)
    line = json.loads(JSONFormatter().format(_record(
        "Updated Channel", resource="Channel", resource_id=rid,
        records=3, cleared=["description"],
    )))

    assert line["resource"] == "Channel"
    assert line["resource_id"] == str(rid)
    assert line["records"] == 3
    assert line["cleared"] == ["description"]


def test_unknown_and_empty_extras_are_omitted():
    line = json.loads(JSONFormatter().format(_record("x", actor_id=None, secret="hidden")))

    assert "actor_id" not in line
    assert "secret" not in line
