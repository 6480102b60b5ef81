"""Dispatch layer and country registry."""

from national_ids.core.dispatch import (
    NationalIdValidator,
    get_country_id_format,
    get_default_validator,
    list_supported_countries,
    parse_id_info,
    validate_multiple_ids,
    validate_national_id,
)
from national_ids.core.registry import ALIASES, COUNTRIES, CountryHandler, get_handler

__all__ = [
    "NationalIdValidator",
    "get_country_id_format",
    "get_default_validator",
    "list_supported_countries",
    "parse_id_info",
    "validate_multiple_ids",
    "validate_national_id",
    "ALIASES",
    "COUNTRIES",
    "CountryHandler",
    "get_handler",
]
