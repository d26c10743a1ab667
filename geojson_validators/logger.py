"""
Logging configuration for geojson-validators.

Provides structured logging with configurable log levels
and formatted output for debugging validation failures.

Usage:
    from geojson_validators.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Validation failed", extra={"kind": "RingNotClosed"})
"""

import logging
import sys
import time
from functools import lru_cache
from typing import Any

from geojson_validators.config import get_settings


class GeoJSONFormatter(logging.Formatter):
    """
    Custom formatter for validator logs.

    Formats logs with timestamp, level, logger name, and message.
    Includes extra fields if provided.
    """

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        base_message = super().format(record)

        # Standard LogRecord attributes are not extra fields
        standard_attrs = {
            'name', 'msg', 'args', 'created', 'filename', 'funcName',
            'levelname', 'levelno', 'lineno', 'module', 'msecs',
            'pathname', 'process', 'processName', 'relativeCreated',
            'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
            'taskName', 'message', 'asctime',
        }

        extra_fields = {
            k: v for k, v in record.__dict__.items()
            if k not in standard_attrs and not k.startswith('_')
        }

        if extra_fields:
            extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())
            return base_message + extra_str

        return base_message


class ValidationCallLogger:
    """
    Context manager for logging a validation call with timing and outcome.

    Usage:
        with ValidationCallLogger(logger, "Polygon") as log:
            result = validate_polygon(value)
            log.set_result(result)
            return result
    """

    def __init__(
        self,
        logger: logging.Logger,
        type_name: str,
    ):
        self.logger = logger
        self.type_name = type_name
        self.result: Any = None
        self._start_time: float = 0

    def __enter__(self) -> "ValidationCallLogger":
        self._start_time = time.perf_counter()
        self.logger.debug(
            f"Validating '{self.type_name}'",
            extra={"geojson_type": self.type_name},
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed_ms = (time.perf_counter() - self._start_time) * 1000

        if exc_val is not None:
            self.logger.error(
                f"Validation of '{self.type_name}' raised: {exc_val}",
                extra={
                    "geojson_type": self.type_name,
                    "elapsed_ms": f"{elapsed_ms:.2f}",
                },
                exc_info=True,
            )
            return False

        self.logger.debug(
            f"Validation of '{self.type_name}' completed",
            extra={
                "geojson_type": self.type_name,
                "elapsed_ms": f"{elapsed_ms:.2f}",
                "result": self._summarize_result(self.result),
            },
        )
        return False

    def set_result(self, result: Any) -> None:
        """Set the result for logging."""
        self.result = result

    def _summarize_result(self, result: Any) -> str:
        """Create a brief summary of the result for logging."""
        if result is None:
            return "None"

        valid = getattr(result, "valid", None)
        if valid is True:
            return "valid"
        if valid is False:
            kind = getattr(result, "kind", None)
            path = getattr(result, "path", None)
            summary = f"invalid: {kind.value if kind else 'unknown'}"
            if path:
                summary += f" at {path}"
            return summary

        return str(type(result).__name__)


def get_log_level() -> int:
    """
    Get log level from settings (GEOJSON_LOG_LEVEL).

    Supports: DEBUG, INFO, WARNING, ERROR, CRITICAL
    Default: INFO. GEOJSON_DEBUG=true always yields DEBUG.
    """
    settings = get_settings()
    if settings.debug:
        return logging.DEBUG

    level_name = settings.log_level.upper()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    return level_map.get(level_name, logging.INFO)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Loggers are cached to avoid duplicate handlers.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logging.Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(get_log_level())

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(get_log_level())
        handler.setFormatter(GeoJSONFormatter())

        logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger
