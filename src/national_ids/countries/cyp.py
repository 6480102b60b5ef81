"""Cyprus tax identification code (TIC): eight digits and a check letter."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="CY",
    min_length=9,
    max_length=9,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^(?!12)(?P<number>[013459]\d{7})(?P<checksum>[A-Z])$", re.ASCII),
    names=("Αριθμός Εγγραφής Φ.Π.Α.", "Tax Identification Code", "TIC"),
    links=("https://en.wikipedia.org/wiki/VAT_identification_number",),
)

# Translation of digits in even (0-based) positions
EVEN_POSITION_VALUES = [1, 0, 5, 7, 9, 13, 15, 17, 19, 21]


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return None
    digits = digits_of(match.group("number"))
    total = sum(EVEN_POSITION_VALUES[d] if i % 2 == 0 else d for i, d in enumerate(digits))
    return chr(65 + total % 26)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return False
    return checksum(id_number) == match.group("checksum")
