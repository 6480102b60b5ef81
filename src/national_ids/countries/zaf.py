"""
South Africa National ID Number

Format: YYMMDDSSSSCAZ
- YYMMDD: date of birth; years below 50 belong to the 2000s
- SSSS: sequence number, 0000-4999 male and 5000-9999 female
- C: 0 for citizens, 1 for permanent residents
- A: legacy race digit, now 8 or 9
- Z: Luhn check digit
"""

import re
from typing import Optional

from national_ids.models import Citizenship, Gender, IdMetadata
from national_ids.utils.checksums import luhn_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="ZA",
    min_length=13,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<yy>\d{2})(?P<mm>0[1-9]|1[012])(?P<dd>0[1-9]|[12]\d|3[01])"
        r"(?P<sn>\d{4})(?P<citizenship>[01])[89](?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("National Identity Number", "ID Number"),
    links=("https://en.wikipedia.org/wiki/South_African_identity_card",),
)

# Two-digit years below this value are in the 2000s
CENTURY_PIVOT = 50


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return luhn_digit(digits_of(id_number[:12]))


def _birth_date(match: re.Match):
    yy = int(match.group("yy"))
    year = (2000 if yy < CENTURY_PIVOT else 1900) + yy
    return to_date(year, int(match.group("mm")), int(match.group("dd")))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _birth_date(match) is None:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    """Decode birth date, gender and citizenship from a valid ID number.

    Examples:
        >>> parse("8001015009087")["gender"]
        <Gender.FEMALE: 'female'>
    """
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    sn = int(match.group("sn"))
    return {
        "birth_date": _birth_date(match),
        "gender": Gender.FEMALE if sn >= 5000 else Gender.MALE,
        "citizenship": (
            Citizenship.CITIZEN if match.group("citizenship") == "0" else Citizenship.RESIDENT
        ),
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }
