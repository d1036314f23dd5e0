"""Tests for structured logging."""

import json

import pytest

from symref.logging import LogContext, configure_logging, get_logger


@pytest.fixture
def json_logs():
    configure_logging(level="DEBUG", json_format=True, add_timestamp=False)
    yield
    configure_logging(level="WARNING", json_format=True)


def last_record(capsys):
    lines = capsys.readouterr().err.strip().splitlines()
    return json.loads(lines[-1])


class TestLogging:
    """Tests for configure_logging and LogContext."""

    def test_json_record(self, json_logs, capsys):
        """Test that records are JSON on stderr with service metadata."""
        get_logger("symref.test").info("document_built", functions=2)

        record = last_record(capsys)
        assert record["event"] == "document_built"
        assert record["functions"] == 2
        assert record["level"] == "info"
        assert record["service.name"] == "symref"
        assert record["logger"] == "symref.test"
        assert "timestamp" not in record

    def test_logger_created_before_configuration(self, capsys):
        """Test that an import-time logger follows a later configure_logging."""
        logger = get_logger("symref.early")
        configure_logging(level="DEBUG", json_format=True, add_timestamp=False)

        try:
            logger.debug("late_event")
            record = last_record(capsys)
        finally:
            configure_logging(level="WARNING", json_format=True)

        assert record["event"] == "late_event"
        assert record["logger"] == "symref.early"
        assert "logger_name" not in record

    def test_stdout_stays_clean(self, json_logs, capsys):
        """Test that nothing is logged to stdout."""
        get_logger("symref.test").info("event")

        assert capsys.readouterr().out == ""

    def test_level_filtering(self, capsys):
        """Test that records below the level are dropped."""
        configure_logging(level="WARNING", json_format=True)

        get_logger("symref.test").info("hidden")

        assert capsys.readouterr().err == ""

    def test_log_context(self, json_logs, capsys):
        """Test that bound context appears only inside the block."""
        logger = get_logger("symref.test")

        with LogContext(output_format="html"):
            logger.info("inside")
        assert last_record(capsys)["output_format"] == "html"

        logger.info("outside")
        assert "output_format" not in last_record(capsys)

    def test_timestamp(self, capsys):
        """Test the ISO timestamp."""
        configure_logging(level="INFO", json_format=True)

        get_logger().info("stamped")

        assert "timestamp" in last_record(capsys)
        configure_logging(level="WARNING", json_format=True)
