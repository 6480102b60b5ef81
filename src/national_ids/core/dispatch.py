"""
National ID Dispatch

Routes a (country code, identifier) pair to the matching country module and
normalizes the outcome into a ValidationResult.

Example:
    >>> from national_ids.core.dispatch import validate_national_id
    >>> result = validate_national_id("UK", "AB123456C")
    >>> result.is_valid, result.country_code
    (True, 'GBR')
"""

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from national_ids.config.alias_loader import AliasConfig, load_aliases_from_yaml
from national_ids.core.registry import ALIASES, COUNTRIES, CountryHandler
from national_ids.logging.setup import get_logger, reset_country_code, set_country_code
from national_ids.models import (
    CountryIdFormat,
    CountryInfo,
    IdLength,
    ValidationResult,
)

logger = get_logger(__name__)

AliasSource = Union[Mapping[str, str], Iterable[AliasConfig]]
BatchEntry = Union[Mapping[str, Any], tuple[Any, Any]]


class NationalIdValidator:
    """Resolves country codes and validates identifiers.

    Instances are immutable after construction and safe to share between
    threads.

    Args:
        extra_aliases: Additional aliases, either a mapping of alias to
            country code or AliasConfig entries. Targets may be canonical
            codes or built-in aliases.

    Raises:
        ValueError: If an alias targets an unsupported country.
    """

    def __init__(self, extra_aliases: Optional[AliasSource] = None) -> None:
        aliases = dict(ALIASES)
        for alias, target in self._alias_pairs(extra_aliases):
            canonical = aliases.get(target, target)
            if canonical not in COUNTRIES:
                raise ValueError(f"Alias {alias} targets unsupported country code: {target}")
            aliases[alias] = canonical
        self._aliases = aliases

    @classmethod
    def from_yaml(cls, path: Union[Path, str]) -> "NationalIdValidator":
        """Create a validator with extra aliases loaded from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file or an alias target is invalid.
            yaml.YAMLError: If the YAML is malformed.
        """
        aliases = load_aliases_from_yaml(path)
        logger.info(
            "Loaded country code aliases",
            extra={"event": "aliases_loaded", "path": str(path), "count": len(aliases)},
        )
        return cls(extra_aliases=aliases)

    @staticmethod
    def _alias_pairs(extra_aliases: Optional[AliasSource]) -> list[tuple[str, str]]:
        if not extra_aliases:
            return []
        if isinstance(extra_aliases, Mapping):
            configs = [AliasConfig(alias=k, country_code=v) for k, v in extra_aliases.items()]
        else:
            configs = list(extra_aliases)
        return [(config.alias, config.country_code) for config in configs]

    @property
    def aliases(self) -> dict[str, str]:
        """Alias table in effect, as a copy."""
        return dict(self._aliases)

    def resolve(self, country_code: Any) -> Optional[CountryHandler]:
        """Resolve a caller-supplied country code to its handler.

        Returns:
            The handler, or None for unsupported or non-string codes.
        """
        if not isinstance(country_code, str):
            return None
        code = country_code.strip().upper()
        return COUNTRIES.get(self._aliases.get(code, code))

    def validate(self, country_code: Any, id_number: Any) -> ValidationResult:
        """Validate one identifier.

        Never raises: unsupported countries, malformed input and faults
        inside a country module all produce an invalid result.

        Args:
            country_code: Alpha-3 code or alias, case-insensitive.
            id_number: Identifier as written by the holder.

        Returns:
            ValidationResult with extracted information when the identifier
            is valid and the country supports parsing.
        """
        handler = self.resolve(country_code)
        if handler is None:
            if isinstance(country_code, str):
                code = country_code.strip().upper()
            else:
                code = str(country_code)
            logger.debug(
                "Unsupported country code",
                extra={"event": "country_unsupported", "requested_code": code},
            )
            return ValidationResult(
                is_valid=False,
                country_code=code,
                id_number=id_number,
                error_message=f"Unsupported country code: {code}",
            )

        token = set_country_code(handler.code)
        try:
            logger.debug(
                "Resolved country code",
                extra={"event": "country_resolved", "requested_code": country_code},
            )
            if not isinstance(id_number, str):
                return ValidationResult(
                    is_valid=False,
                    country_code=handler.code,
                    id_number=id_number,
                    error_message="ID number must be a string",
                )
            try:
                is_valid = bool(handler.validate(id_number))
                extracted_info = None
                if is_valid and handler.parse is not None:
                    extracted_info = handler.parse(id_number)
            except Exception as e:
                logger.warning(
                    "Country module raised during validation",
                    extra={"event": "validation_error", "error_type": type(e).__name__},
                )
                return ValidationResult(
                    is_valid=False,
                    country_code=handler.code,
                    id_number=id_number,
                    error_message=str(e),
                )
            return ValidationResult(
                is_valid=is_valid,
                country_code=handler.code,
                id_number=id_number,
                extracted_info=extracted_info,
            )
        finally:
            reset_country_code(token)

    def parse(self, country_code: Any, id_number: Any) -> Optional[dict[str, Any]]:
        """Decode the information embedded in an identifier.

        Returns:
            The decoded fields, or None if the country is unknown, has no
            parser, or the identifier is invalid.
        """
        handler = self.resolve(country_code)
        if handler is None or handler.parse is None or not isinstance(id_number, str):
            return None
        token = set_country_code(handler.code)
        try:
            return handler.parse(id_number)
        except Exception as e:
            logger.warning(
                "Country module raised during parsing",
                extra={"event": "parse_error", "error_type": type(e).__name__},
            )
            return None
        finally:
            reset_country_code(token)

    def validate_many(self, entries: Iterable[BatchEntry]) -> list[ValidationResult]:
        """Validate a batch of identifiers, preserving order.

        Entries are mappings with ``countryCode``/``idNumber`` (or
        ``country_code``/``id_number``) keys, or ``(country_code, id_number)``
        pairs.
        """
        results = []
        for entry in entries:
            country_code, id_number = self._unpack(entry)
            results.append(self.validate(country_code, id_number))
        return results

    @staticmethod
    def _unpack(entry: BatchEntry) -> tuple[Any, Any]:
        if isinstance(entry, Mapping):
            country_code = entry.get("countryCode", entry.get("country_code"))
            id_number = entry.get("idNumber", entry.get("id_number"))
            return country_code, id_number
        if isinstance(entry, (tuple, list)) and len(entry) == 2:
            return entry[0], entry[1]
        return None, entry

    def format_for(self, country_code: Any) -> Optional[CountryIdFormat]:
        """Describe the identifier format of a country, or None if unsupported."""
        handler = self.resolve(country_code)
        if handler is None:
            return None
        metadata = handler.metadata
        return CountryIdFormat(
            country_code=handler.code,
            country_name=handler.name,
            id_type=handler.id_type,
            format=handler.format,
            length=IdLength(min=metadata.min_length, max=metadata.max_length),
            has_checksum=metadata.checksum,
            is_parsable=metadata.parsable,
            metadata={
                "iso3166_alpha2": metadata.iso3166_alpha2,
                "names": list(metadata.names),
                "links": list(metadata.links),
                "deprecated": metadata.deprecated,
            },
        )


def list_supported_countries() -> list[CountryInfo]:
    """List every supported country in catalog order.

    Returns:
        A new list on every call.
    """
    return [
        CountryInfo(code=handler.code, name=handler.name, id_type=handler.id_type)
        for handler in COUNTRIES.values()
    ]


_default_validator = NationalIdValidator()


def get_default_validator() -> NationalIdValidator:
    """Get the validator used by the module-level functions (built-in aliases only)."""
    return _default_validator


def validate_national_id(country_code: Any, id_number: Any) -> ValidationResult:
    """Validate one identifier with the default validator.

    Example:
        >>> validate_national_id("USA", "123-45-6789").is_valid
        True
    """
    return _default_validator.validate(country_code, id_number)


def parse_id_info(country_code: Any, id_number: Any) -> Optional[dict[str, Any]]:
    return _default_validator.parse(country_code, id_number)


def validate_multiple_ids(entries: Iterable[BatchEntry]) -> list[ValidationResult]:
    return _default_validator.validate_many(entries)


def get_country_id_format(country_code: Any) -> Optional[CountryIdFormat]:
    return _default_validator.format_for(country_code)
