"""Tests for JSONFormatter and setup_logging."""

import json
import logging

from claimcount.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "claimcount.test", logging.INFO, __file__, 1, "Claims counted", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_line_has_base_fields():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "INFO"
    assert line["logger"] == "claimcount.test"
    assert line["message"] == "Claims counted"
    assert "timestamp" in line


def test_extras_copied_only_when_set():
    line = json.loads(JSONFormatter().format(
        _record(policy_id=1001, claim_count=4, source=None, unrelated="x"),
    ))
    assert line["policy_id"] == 1001
    assert line["claim_count"] == 4
    assert "source" not in line
    assert "unrelated" not in line


def test_setup_logging_replaces_own_handler():
    root = logging.getLogger()
    level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        root.removeHandler(second)
        root.setLevel(level)
