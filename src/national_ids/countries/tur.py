"""
Turkey Identification Number (T.C. Kimlik No)

Eleven digits, the first never 0.
- 10th digit: (7 * sum of odd positions - sum of even positions) mod 10,
  over the first nine digits
- 11th digit: sum of the first ten digits mod 10
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="TR",
    min_length=11,
    max_length=11,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^[1-9]\d{10}$", re.ASCII),
    names=("TC Kimlik No", "Turkish Identification Number", "T.C. Kimlik Numarası"),
    links=("https://en.wikipedia.org/wiki/Turkish_Identification_Number",),
)


def _tenth_digit(digits: list[int]) -> int:
    return (7 * sum(digits[0:9:2]) - sum(digits[1:8:2])) % 10


def checksum(id_number: str) -> Optional[int]:
    """Return the final check digit, or None if the tenth digit is already wrong."""
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    digits = digits_of(number)
    if _tenth_digit(digits) != digits[9]:
        return None
    return sum(digits[:10]) % 10


def validate(id_number: str) -> bool:
    """Validate a T.C. Kimlik No.

    Examples:
        >>> validate("10000000146")
        True
        >>> validate("02345678950")
        False
    """
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return False
    return checksum(number) == int(number[-1])
