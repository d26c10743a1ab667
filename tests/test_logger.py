"""
Tests for the logging module.
"""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from geojson_validators.config import get_settings
from geojson_validators.logger import (
    GeoJSONFormatter,
    ValidationCallLogger,
    get_log_level,
    get_logger,
)
from geojson_validators.validators import validate_any, validate_polygon


class ListHandler(logging.Handler):
    """Collects records for assertions."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestGetLogLevel:
    """Tests for get_log_level function."""

    def test_default_log_level(self):
        """Default log level should be INFO."""
        with patch.dict(os.environ, {}, clear=True):
            get_settings.cache_clear()
            assert get_log_level() == logging.INFO

    def test_debug_log_level(self):
        """GEOJSON_LOG_LEVEL=DEBUG should return DEBUG level."""
        with patch.dict(os.environ, {"GEOJSON_LOG_LEVEL": "DEBUG"}):
            get_settings.cache_clear()
            assert get_log_level() == logging.DEBUG

    def test_case_insensitive(self):
        """Log level should be case insensitive."""
        with patch.dict(os.environ, {"GEOJSON_LOG_LEVEL": "warning"}):
            get_settings.cache_clear()
            assert get_log_level() == logging.WARNING

    def test_invalid_log_level_defaults_to_info(self):
        """Invalid log level should default to INFO."""
        with patch.dict(os.environ, {"GEOJSON_LOG_LEVEL": "INVALID"}):
            get_settings.cache_clear()
            assert get_log_level() == logging.INFO

    def test_debug_flag_forces_debug(self):
        """GEOJSON_DEBUG=true overrides the configured level."""
        with patch.dict(os.environ, {"GEOJSON_DEBUG": "true", "GEOJSON_LOG_LEVEL": "ERROR"}):
            get_settings.cache_clear()
            assert get_log_level() == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger(self):
        """get_logger should return a Logger instance."""
        logger = get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_logger_uses_formatter(self):
        """Logger handler should use GeoJSONFormatter."""
        logger = get_logger("formatter_test_module")
        assert len(logger.handlers) >= 1
        for handler in logger.handlers:
            assert isinstance(handler.formatter, GeoJSONFormatter)

    def test_cached_logger(self):
        """Same name should return the same logger instance."""
        assert get_logger("cached_test") is get_logger("cached_test")


class TestGeoJSONFormatter:
    """Tests for GeoJSONFormatter class."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="Test message",
            args=(),
            exc_info=None,
        )

    def test_basic_format(self):
        """Formatter should include name, level, and message."""
        formatted = GeoJSONFormatter().format(self._record())
        assert "test" in formatted
        assert "INFO" in formatted
        assert "Test message" in formatted
        assert "|" not in formatted

    def test_extra_fields(self):
        """Formatter should include extra fields."""
        record = self._record()
        record.geojson_type = "Polygon"
        record.kind = "RingNotClosed"
        formatted = GeoJSONFormatter().format(record)
        assert "geojson_type=Polygon" in formatted
        assert "kind=RingNotClosed" in formatted


class TestValidationCallLogger:
    """Tests for ValidationCallLogger context manager."""

    def test_logs_start_and_completion(self):
        """Start and completion are logged at DEBUG."""
        logger = logging.getLogger("validation_call_test")
        logger.setLevel(logging.DEBUG)
        handler = ListHandler()
        logger.addHandler(handler)
        try:
            with ValidationCallLogger(logger, "Point") as log:
                log.set_result(None)
        finally:
            logger.removeHandler(handler)

        assert len(handler.records) == 2
        assert handler.records[0].geojson_type == "Point"
        assert hasattr(handler.records[1], "elapsed_ms")
        assert handler.records[1].result == "None"

    def test_summarizes_invalid_result(self):
        """Invalid results are summarized with kind and path."""
        logger = get_logger("summary_test")
        result = validate_polygon({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [2, 2]]]})
        with ValidationCallLogger(logger, "Polygon") as log:
            summary = log._summarize_result(result)
        assert summary == "invalid: RingNotClosed at coordinates[0]"

    def test_summarizes_valid_result(self, sample_point):
        """Valid results summarize as 'valid'."""
        logger = get_logger("summary_test")
        with ValidationCallLogger(logger, "Point") as log:
            assert log._summarize_result(validate_any(sample_point)) == "valid"

    def test_exception_is_reraised(self):
        """Exceptions are logged and re-raised."""
        logger = get_logger("exception_test")
        with pytest.raises(ValueError):
            with ValidationCallLogger(logger, "Feature"):
                raise ValueError("Test error")

    def test_validate_any_logs(self, sample_point):
        """validate_any logs each dispatched call."""
        logger = logging.getLogger("geojson_validators.validators")
        handler = ListHandler()
        logger.addHandler(handler)
        previous = logger.level
        logger.setLevel(logging.DEBUG)
        try:
            validate_any(sample_point)
        finally:
            logger.removeHandler(handler)
            logger.setLevel(previous)

        assert any(getattr(r, "geojson_type", None) == "Point" for r in handler.records)
        assert any(getattr(r, "result", None) == "valid" for r in handler.records)

    def test_validate_any_logs_settings_error(self, sample_point):
        """A settings failure during validation is logged and propagated."""
        logger = logging.getLogger("geojson_validators.validators")
        handler = ListHandler()
        logger.addHandler(handler)
        try:
            with patch.dict(os.environ, {"GEOJSON_LATITUDE_MIN": "10", "GEOJSON_LATITUDE_MAX": "-10"}):
                get_settings.cache_clear()
                with pytest.raises(ValidationError):
                    validate_any(sample_point)
        finally:
            logger.removeHandler(handler)

        errors = [r for r in handler.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].geojson_type == "Point"
        assert errors[0].exc_info is not None
