"""
Czech Republic Birth Number (Rodné číslo)

Format: YYMMDD/SSSC
- Numbers issued before 1954 have nine digits and no check digit.
- Ten-digit numbers carry a check digit: (YYMMDDSSS mod 11) mod 10.
  Their two-digit years below 54 belong to the 2000s.
- Women have 50 added to the month. From 2004 on, 20 may be added as well
  when a day's numbers run out (so 70 for women).

The same scheme is used by Slovakia.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date


METADATA = IdMetadata(
    iso3166_alpha2="CZ",
    min_length=9,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})/?(?P<sn>\d{3})(?P<checksum>\d)?$", re.ASCII),
    names=("Rodné číslo", "Birth Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Czech_Republic_and_Slovakia",),
)


def checksum(id_number: str) -> Optional[int]:
    """Compute the check digit of a ten-digit birth number."""
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    if not match or match.group("checksum") is None:
        return None
    number = id_number.replace("/", "")
    return int(number[:9]) % 11 % 10


def decode_birth_number(id_number: str) -> Optional[dict]:
    """Validate and decode a Czech or Slovak birth number.

    Args:
        id_number: Birth number with or without the slash.

    Returns:
        Decoded information, or None if the number is invalid.
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return None
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return None
    yy = int(match.group("yy"))
    if match.group("checksum") is None:
        if yy >= 54:
            return None
        year = 1900 + yy
    else:
        if checksum(id_number) != int(match.group("checksum")):
            return None
        year = (2000 if yy < 54 else 1900) + yy

    month = int(match.group("mm"))
    gender = Gender.MALE
    if month > 50:
        month -= 50
        gender = Gender.FEMALE
    if month > 20:
        if year < 2004:
            return None
        month -= 20

    birth_date = to_date(year, month, int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": gender,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")) if match.group("checksum") else None,
    }


def validate(id_number: str) -> bool:
    """Validate a Czech birth number.

    Examples:
        >>> validate("000101/0009")
        True
        >>> validate("8508089123")
        False
    """
    return decode_birth_number(id_number) is not None


def parse(id_number: str) -> Optional[dict]:
    return decode_birth_number(id_number)
