"""
Saudi Arabia National ID / Iqama Number

Ten digits; the first is 1 for citizens and 2 for residents (Iqama).
The last digit is a Luhn check digit.
"""

import re
from typing import Optional

from national_ids.models import Citizenship, IdMetadata
from national_ids.utils.checksums import luhn_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="SA",
    min_length=10,
    max_length=10,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<type>[12])\d{8}(?P<checksum>\d)$", re.ASCII),
    names=("National ID", "Iqama", "Saudi ID"),
    links=(
        "https://en.wikipedia.org/wiki/National_identification_number#Saudi_Arabia",
        "https://www.absher.sa/",
    ),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    return luhn_digit(digits_of(number[:9]), True)


def validate(id_number: str) -> bool:
    """Validate a Saudi national ID or Iqama number.

    Examples:
        >>> validate("1000000008")
        True
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


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    number = normalize(id_number)
    return {
        "citizenship": Citizenship.CITIZEN if number[0] == "1" else Citizenship.RESIDENT,
        "checksum": int(number[-1]),
    }
