"""
Kuwait Civil Number

Format: CYYMMDDSSSSK
C is the century (1: 1800s, 2: 1900s, 3: 2000s). The check digit is
11 - (weighted sum mod 11); results above 9 are never issued.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="KW",
    min_length=12,
    max_length=12,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<c>[1-3])(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{4})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("الرقم المدني", "Civil Number", "Civil ID"),
    links=("https://en.wikipedia.org/wiki/Kuwaiti_identity_card",),
)

WEIGHTS = [2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    check = weighted_modulus_digit(digits_of(id_number[:11]), WEIGHTS, 11)
    return check if check <= 9 else None


def _birth_date(match: re.Match):
    year = 1700 + int(match.group("c")) * 100 + int(match.group("yy"))
    return to_date(year, int(match.group("mm")), int(match.group("dd")))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _birth_date(match) is None:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "birth_date": _birth_date(match),
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }
