"""Presidio recognizers for national ID numbers in free text."""

from national_ids.recognizers.national_id import (
    NationalIdRecognizer,
    create_national_id_recognizers,
)
from national_ids.recognizers.registry import (
    create_analyzer_with_national_id_support,
    get_supported_entities,
)

__all__ = [
    "NationalIdRecognizer",
    "create_national_id_recognizers",
    "create_analyzer_with_national_id_support",
    "get_supported_entities",
]
