"""Logging configuration module for national-ids."""

from national_ids.logging.setup import get_country_code, get_logger, setup_logging

__all__ = ["get_country_code", "get_logger", "setup_logging"]
