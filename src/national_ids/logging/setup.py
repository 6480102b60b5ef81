"""Logging configuration for national-ids.

Provides structured JSON logging with the country code of the validation in
progress attached to every record.
"""

import logging
import os
import sys
from contextvars import ContextVar, Token
from typing import Any, Optional

from pythonjsonlogger import jsonlogger


# Country code of the validation running in the current context
country_code_var: ContextVar[str] = ContextVar("country_code", default="")


class CountryContextFilter(logging.Filter):
    """Filter that adds country_code to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.country_code = country_code_var.get() or "-"
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with renamed standard fields and library context."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = "national-ids"

        if hasattr(record, "country_code"):
            log_record["country_code"] = record.country_code


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure logging for applications embedding the library.

    The library itself never calls this; it only emits records through
    loggers obtained from :func:`get_logger`.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               NATIONAL_IDS_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     NATIONAL_IDS_LOG_FORMAT == 'json' or True.
    """
    if level is None:
        level = os.getenv("NATIONAL_IDS_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        log_format = os.getenv("NATIONAL_IDS_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(CountryContextFilter())

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - [%(country_code)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Presidio logs every analyzer construction at INFO
    logging.getLogger("presidio-analyzer").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def set_country_code(country_code: str) -> Token:
    """Set the country code for the current context.

    Args:
        country_code: Canonical alpha-3 code being validated.

    Returns:
        Token for :func:`reset_country_code`.
    """
    return country_code_var.set(country_code)


def reset_country_code(token: Token) -> None:
    """Restore the country code that was current before :func:`set_country_code`.

    Args:
        token: Token returned by the matching :func:`set_country_code` call.
    """
    country_code_var.reset(token)


def get_country_code() -> str:
    """Get the current country code, or an empty string outside a validation."""
    return country_code_var.get()
