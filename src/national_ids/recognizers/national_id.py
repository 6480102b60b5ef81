"""
National ID Recognizer

Finds candidate national identification numbers in free text with each
country's format pattern and confirms them with the country validator, so
only numbers that pass the checksum and date rules are reported.
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from national_ids.core.registry import COUNTRIES, CountryHandler, get_handler


def entity_for(country_code: str) -> str:
    """Presidio entity name for a country, e.g. ``CHN_NATIONAL_ID``."""
    return f"{country_code}_NATIONAL_ID"


def _unanchored(regex: str) -> str:
    """Turn an anchored ``^...$`` pattern into one that matches inside text."""
    if regex.startswith("^"):
        regex = regex[1:]
    if regex.endswith("$"):
        regex = regex[:-1]
    return rf"(?<!\w)(?:{regex})(?!\w)"


class NationalIdRecognizer(PatternRecognizer):
    """Recognizer for the national ID of one country.

    Matches are scored by the pattern first and then confirmed by the
    country's ``validate``; numbers that fail validation are dropped.

    Example:
        >>> recognizer = NationalIdRecognizer("CHN")
        >>> results = recognizer.analyze("ID: 11010219840406970X", entities=["CHN_NATIONAL_ID"])
    """

    PATTERN_SCORE = 0.5

    CONTEXT = [
        "id",
        "identity",
        "identification",
        "national id",
        "id number",
        "personal number",
    ]

    def __init__(
        self,
        country_code: str,
        supported_language: str = "en",
        context: Optional[list[str]] = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            country_code: Canonical alpha-3 code or built-in alias.
            supported_language: Language code (default: en).
            context: Additional context words.

        Raises:
            ValueError: If the country is not supported.
        """
        handler = get_handler(country_code.strip().upper())
        if handler is None:
            raise ValueError(f"Unsupported country code: {country_code}")
        self.handler: CountryHandler = handler

        metadata = handler.metadata
        patterns = [
            Pattern(
                name=f"{handler.code.lower()}_national_id",
                regex=_unanchored(metadata.regexp.pattern),
                score=self.PATTERN_SCORE,
            ),
        ]
        context_words = (
            list(self.CONTEXT)
            + [name.lower() for name in metadata.names]
            + [handler.id_type.lower()]
            + (context or [])
        )

        super().__init__(
            supported_entity=entity_for(handler.code),
            patterns=patterns,
            context=context_words,
            supported_language=supported_language,
            name=f"{handler.code.title()}NationalIdRecognizer",
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Confirm a match with the country validator.

        Returns:
            True if valid, False otherwise.
        """
        return self.handler.validate(pattern_text)


def create_national_id_recognizers(
    countries: Optional[list[str]] = None,
    supported_language: str = "en",
) -> list[NationalIdRecognizer]:
    """Create recognizers for the given countries, or for all supported ones.

    Raises:
        ValueError: If a country is not supported.
    """
    codes = countries if countries is not None else list(COUNTRIES)
    return [
        NationalIdRecognizer(code, supported_language=supported_language) for code in codes
    ]
