"""Tests for logging configuration."""

import io
import json
import logging
from unittest.mock import patch

import pytest

from national_ids.logging.setup import (
    CountryContextFilter,
    CustomJsonFormatter,
    country_code_var,
    get_country_code,
    get_logger,
    reset_country_code,
    set_country_code,
    setup_logging,
)


def _record(msg: str = "test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestCountryContextFilter:
    """Tests for CountryContextFilter."""

    def test_adds_country_code_to_record(self):
        """Test that country_code is added to log records."""
        filter_ = CountryContextFilter()
        record = _record()

        token = country_code_var.set("CHN")
        try:
            result = filter_.filter(record)
            assert result is True
            assert record.country_code == "CHN"
        finally:
            country_code_var.reset(token)

    def test_default_country_code(self):
        """Test that country_code is '-' outside a validation."""
        filter_ = CountryContextFilter()
        record = _record()

        token = country_code_var.set("")
        try:
            filter_.filter(record)
            assert record.country_code == "-"
        finally:
            country_code_var.reset(token)


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_adds_service_field(self):
        formatter = CustomJsonFormatter()
        record = _record()
        record.country_code = "ZAF"

        log_record = {}
        formatter.add_fields(log_record, record, {})

        assert log_record.get("service") == "national-ids"
        assert log_record.get("country_code") == "ZAF"

    def test_renames_levelname_to_level(self):
        formatter = CustomJsonFormatter()
        record = _record()

        log_record = {"levelname": "INFO"}
        formatter.add_fields(log_record, record, {})

        assert "levelname" not in log_record
        assert log_record.get("level") == "INFO"

    def test_renames_asctime_to_timestamp(self):
        formatter = CustomJsonFormatter()
        record = _record()

        log_record = {"asctime": "2024-01-01T00:00:00+0000"}
        formatter.add_fields(log_record, record, {})

        assert "asctime" not in log_record
        assert log_record.get("timestamp") == "2024-01-01T00:00:00+0000"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self):
        """Test that JSON lines carry the event fields and country code."""
        stream = io.StringIO()
        with patch("sys.stdout", stream):
            setup_logging(level="INFO", json_format=True)

        token = set_country_code("GBR")
        try:
            get_logger("test_json").info(
                "Resolved country code", extra={"event": "country_resolved"}
            )
        finally:
            reset_country_code(token)

        line = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert line["message"] == "Resolved country code"
        assert line["level"] == "INFO"
        assert line["event"] == "country_resolved"
        assert line["country_code"] == "GBR"
        assert line["service"] == "national-ids"

    def test_setup_text_format(self):
        stream = io.StringIO()
        with patch("sys.stdout", stream):
            setup_logging(level="DEBUG", json_format=False)

        get_logger("test_text").debug("plain message")

        assert "[-] plain message" in stream.getvalue()

    def test_replaces_existing_handlers(self):
        setup_logging(level="INFO")
        setup_logging(level="INFO")

        assert len(logging.getLogger().handlers) == 1

    def test_setup_from_environment(self):
        """Test that logging reads from environment variables."""
        with patch.dict(
            "os.environ",
            {
                "NATIONAL_IDS_LOG_LEVEL": "WARNING",
                "NATIONAL_IDS_LOG_FORMAT": "text",
            },
        ):
            setup_logging()

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert not isinstance(root_logger.handlers[0].formatter, CustomJsonFormatter)

    def test_quiets_presidio(self):
        setup_logging(level="DEBUG")

        assert logging.getLogger("presidio-analyzer").level == logging.WARNING


class TestCountryCodeHelpers:
    """Tests for the country code context helpers."""

    def test_set_and_reset(self):
        token = set_country_code("DEU")
        assert get_country_code() == "DEU"
        reset_country_code(token)
        assert get_country_code() == ""

    def test_default_country_code(self):
        assert get_country_code() == ""

    def test_reset_restores_outer_code(self):
        """Nested validations restore the enclosing country code."""
        outer = set_country_code("SRB")
        inner = set_country_code("BIH")
        assert get_country_code() == "BIH"

        reset_country_code(inner)
        assert get_country_code() == "SRB"

        reset_country_code(outer)
        assert get_country_code() == ""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger(self):
        logger = get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_library_does_not_configure_root(self):
        """Importing the library leaves handler setup to the application."""
        import national_ids  # noqa: F401

        assert get_logger("national_ids").handlers == []
