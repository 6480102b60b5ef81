"""
Data models for national ID validation.

Country modules describe themselves with IdMetadata; the dispatch layer
returns pydantic models that serialize with camelCase keys.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Gender encoded in an identifier."""

    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non-binary"


class Citizenship(str, Enum):
    """Citizenship or residency classification."""

    CITIZEN = "citizen"
    RESIDENT = "resident"
    FOREIGN = "foreign"


@dataclass(frozen=True)
class IdMetadata:
    """Static format description of one country's identifier.

    Attributes:
        iso3166_alpha2: ISO 3166-1 alpha-2 code of the issuing country.
        min_length: Minimum length of the identifier (without separators).
        max_length: Maximum length of the identifier (without separators).
        parsable: Whether information can be decoded from the identifier.
        checksum: Whether the identifier carries a check digit.
        regexp: Anchored pattern matching the accepted format.
        names: Official and common names of the identifier.
        links: Reference documentation.
        deprecated: Whether the identifier has been withdrawn.
    """

    iso3166_alpha2: str
    min_length: int
    max_length: int
    parsable: bool
    checksum: bool
    regexp: re.Pattern
    names: tuple[str, ...] = field(default_factory=tuple)
    links: tuple[str, ...] = field(default_factory=tuple)
    deprecated: bool = False


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ValidationResult(_CamelModel):
    """Uniform outcome of validating one identifier."""

    is_valid: bool = Field(..., alias="isValid", description="Whether the identifier is valid")
    country_code: str = Field(..., alias="countryCode", description="Canonical country code")
    id_number: Any = Field(..., alias="idNumber", description="Identifier as supplied by the caller")
    extracted_info: Optional[dict[str, Any]] = Field(
        None, alias="extractedInfo", description="Decoded information, if any"
    )
    error_message: Optional[str] = Field(
        None, alias="errorMessage", description="Reason the identifier could not be validated"
    )


class CountryInfo(_CamelModel):
    """Catalog entry for a supported country."""

    code: str = Field(..., description="Three-letter country code")
    name: str = Field(..., description="Country name")
    id_type: str = Field(..., alias="idType", description="Name of the identifier")


class IdLength(_CamelModel):
    """Length bounds of an identifier."""

    min: int = Field(..., description="Minimum length")
    max: int = Field(..., description="Maximum length")


class CountryIdFormat(_CamelModel):
    """Format descriptor returned for a supported country."""

    country_code: str = Field(..., alias="countryCode")
    country_name: str = Field(..., alias="countryName")
    id_type: str = Field(..., alias="idType")
    format: str = Field(..., description="Human-readable layout of the identifier")
    length: IdLength
    has_checksum: bool = Field(..., alias="hasChecksum")
    is_parsable: bool = Field(..., alias="isParsable")
    metadata: dict[str, Any] = Field(default_factory=dict)
