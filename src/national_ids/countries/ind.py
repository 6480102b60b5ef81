"""India Aadhaar number: twelve digits, first digit 2-9, Verhoeff check digit."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import verhoeff_check, verhoeff_digit
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="IN",
    min_length=12,
    max_length=14,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^[2-9]\d{3} ?\d{4} ?\d{4}$", re.ASCII),
    names=("Aadhaar", "Unique Identification Number", "UID"),
    links=("https://en.wikipedia.org/wiki/Aadhaar",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return verhoeff_digit(digits_of(id_number.replace(" ", ""))[:11])


def validate(id_number: str) -> bool:
    """Validate an Aadhaar number.

    Examples:
        >>> validate("2341 2341 2346")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return verhoeff_check(digits_of(id_number.replace(" ", "")))
