"""Unit tests for structured logging."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import json
import logging
from logger import JSONFormatter, setup_logging


def _record(msg="Summary generated", **extra):
    record = logging.LogRecord(
        name="services.summarizer",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test suite for JSONFormatter."""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "services.summarizer"
        assert data["message"] == "Summary generated"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields(self):
        """Test whitelisted extra fields are included."""
        record = _record(request_id="abc123", error_code="RATE_LIMIT_ERROR", latency_ms=12, unrelated="x")

        data = json.loads(JSONFormatter().format(record))

        assert data["request_id"] == "abc123"
        assert data["error_code"] == "RATE_LIMIT_ERROR"
        assert data["latency_ms"] == 12
        assert "unrelated" not in data

    def test_exception_info(self):
        try:
            raise RuntimeError("upstream down")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: upstream down" in data["exception"]


def test_setup_logging_installs_json_handler():
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    try:
        setup_logging("debug")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JSONFormatter)
    finally:
        root_logger.handlers = original_handlers
        root_logger.setLevel(original_level)
