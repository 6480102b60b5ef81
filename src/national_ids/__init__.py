"""
national-ids: national identification number validation

Validates and decodes national identification numbers (birth date, gender,
citizenship, region) for 80 countries, with Presidio recognizers for
finding them in free text.
"""

__version__ = "0.1.0"

from national_ids.core.dispatch import (
    NationalIdValidator,
    get_country_id_format,
    list_supported_countries,
    parse_id_info,
    validate_multiple_ids,
    validate_national_id,
)
from national_ids.models import (
    Citizenship,
    CountryIdFormat,
    CountryInfo,
    Gender,
    IdLength,
    IdMetadata,
    ValidationResult,
)

__all__ = [
    # Dispatch
    "NationalIdValidator",
    "validate_national_id",
    "parse_id_info",
    "validate_multiple_ids",
    "list_supported_countries",
    "get_country_id_format",
    # Models
    "ValidationResult",
    "CountryInfo",
    "CountryIdFormat",
    "IdLength",
    "IdMetadata",
    "Gender",
    "Citizenship",
]
