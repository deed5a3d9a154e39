"""Tests for logging configuration."""

import io
import json
import logging

from vehicle_risk.logging_config import configure_logging


def test_text_format_writes_to_stream() -> None:
    stream = io.StringIO()
    configure_logging("INFO", "text", stream=stream)
    logging.getLogger("vehicle_risk.test").info("recorded %s", "Kia Rio")
    assert "INFO" in stream.getvalue()
    assert "[vehicle_risk.test] recorded Kia Rio" in stream.getvalue()


def test_json_format() -> None:
    stream = io.StringIO()
    configure_logging("DEBUG", "json", stream=stream)
    logging.getLogger("vehicle_risk.test").debug("score %.1f", 0.8)
    entry = json.loads(stream.getvalue().strip())
    assert entry["level"] == "DEBUG"
    assert entry["message"] == "score 0.8"


def test_level_filters_records() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", "text", stream=stream)
    logging.getLogger("vehicle_risk.test").info("hidden")
    assert stream.getvalue() == ""


def test_reconfiguring_replaces_handler() -> None:
    configure_logging("INFO", "text", stream=io.StringIO())
    configure_logging("INFO", "text", stream=io.StringIO())
    assert len(logging.getLogger().handlers) == 1


def test_json_format_includes_exception() -> None:
    stream = io.StringIO()
    configure_logging("DEBUG", "json", stream=stream)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging.getLogger("vehicle_risk.test").debug("failed", exc_info=True)
    entry = json.loads(stream.getvalue().strip())
    assert "RuntimeError: boom" in entry["exception"]
