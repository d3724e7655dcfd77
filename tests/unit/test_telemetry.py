"""Tests for telemetry module."""

import io
import json
import logging

import pytest

from raydium_client.telemetry import (
    PACKAGE_LOGGER,
    JsonFormatter,
    LogLevel,
    RaydiumLogger,
    TextFormatter,
    configure_logging,
    get_logger,
)


def _record(msg: str, **fields) -> logging.LogRecord:
    record = logging.LogRecord("raydium_client.test", logging.INFO, __file__, 1, msg, None, None)
    if fields:
        record.fields = fields
    return record


@pytest.fixture
def package_logger():
    """Restore the package logger after a test reconfigures it."""
    root = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


class TestLogLevel:
    """Tests for LogLevel."""

    def test_to_logging_level(self) -> None:
        """Test conversion to stdlib levels."""
        assert LogLevel.DEBUG.to_logging_level() == logging.DEBUG
        assert LogLevel.WARNING.to_logging_level() == logging.WARNING


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self) -> None:
        """Test JSON output carries structured fields."""
        line = JsonFormatter().format(_record("Sending request", method="GET", url="/x"))
        data = json.loads(line)

        assert data["message"] == "Sending request"
        assert data["level"] == "INFO"
        assert data["logger"] == "raydium_client.test"
        assert data["method"] == "GET"
        assert data["url"] == "/x"
        assert data["timestamp"].endswith("Z")

    def test_json_formatter_without_timestamp(self) -> None:
        """Test timestamp can be omitted."""
        data = json.loads(JsonFormatter(include_timestamp=False).format(_record("hi")))
        assert "timestamp" not in data

    def test_text_formatter(self) -> None:
        """Test text output appends key=value pairs."""
        line = TextFormatter().format(_record("Received response", status_code=200))
        assert "raydium_client.test: Received response" in line
        assert line.endswith(" status_code=200")


class TestRaydiumLogger:
    """Tests for RaydiumLogger."""

    def test_get_logger(self) -> None:
        """Test getting a logger."""
        logger = get_logger("raydium_client.test.get")
        assert isinstance(logger, RaydiumLogger)
        assert logger.logger.name == "raydium_client.test.get"

    def test_silent_by_default(self) -> None:
        """Test the package logger only carries a NullHandler until configured."""
        root = logging.getLogger(PACKAGE_LOGGER)
        assert any(isinstance(h, logging.NullHandler) for h in root.handlers)

    def test_keywords_become_fields(self, package_logger) -> None:
        """Test keyword arguments are attached to the record as fields."""
        stream = io.StringIO()
        configure_logging(level=LogLevel.DEBUG, format="json", stream=stream)

        get_logger("raydium_client.test.fields").debug(
            "Created pooled client", clients_created=1
        )

        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["message"] == "Created pooled client"
        assert data["clients_created"] == 1

    def test_level_filters(self, package_logger) -> None:
        """Test debug records are dropped at WARNING."""
        stream = io.StringIO()
        configure_logging(level=LogLevel.WARNING, format="text", stream=stream)
        logger = get_logger("raydium_client.test.level")

        logger.debug("hidden")
        logger.warning("Request failed", retryable=True)

        output = stream.getvalue()
        assert "hidden" not in output
        assert "Request failed retryable=True" in output

    def test_reconfigure_replaces_handler(self, package_logger) -> None:
        """Test a second configure call does not duplicate output."""
        first, second = io.StringIO(), io.StringIO()
        configure_logging(level=LogLevel.DEBUG, stream=first)
        configure_logging(level=LogLevel.DEBUG, stream=second)

        get_logger("raydium_client.test.reconfigure").debug("once")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1

    def test_unknown_format(self, package_logger) -> None:
        """Test only json and text formats are accepted."""
        with pytest.raises(ValueError, match="log format"):
            configure_logging(format="xml")
