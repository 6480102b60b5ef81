"""
Iceland Identification Number (Kennitala)

Format: DDMMYY-SSCK
- SS: random digits, C: check digit, K: century (8, 9 or 0)
- Legal entities add 40 to the day.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="IS",
    min_length=10,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<dd>[0-7]\d)(?P<mm>\d{2})(?P<yy>\d{2})-?(?P<sn>\d{2})(?P<checksum>\d)(?P<century>[890])$",
        re.ASCII,
    ),
    names=("Kennitala", "Icelandic Identification Number"),
    links=("https://en.wikipedia.org/wiki/Icelandic_identification_number",),
)

WEIGHTS = [3, 2, 7, 6, 5, 4, 3, 2]
CENTURIES = {"8": 1800, "9": 1900, "0": 2000}


def checksum(id_number: str) -> Optional[int]:
    """Compute the check digit, or None when the number cannot have one."""
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    digits = digits_of(id_number.replace("-", ""))
    modulus = sum(d * w for d, w in zip(digits[:8], WEIGHTS)) % 11
    if modulus == 0:
        return 0
    return None if modulus == 1 else 11 - modulus


def _decode(match: re.Match) -> Optional[dict]:
    day = int(match.group("dd"))
    is_company = day > 40
    if is_company:
        day -= 40
    year = CENTURIES[match.group("century")] + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), day)
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "entity_type": "company" if is_company else "person",
        "checksum": int(match.group("checksum")),
    }


def validate(id_number: str) -> bool:
    """Validate a kennitala.

    Examples:
        >>> validate("120174-3399")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _decode(match) is None:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number))
