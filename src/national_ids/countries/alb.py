"""
Albania Identity Number (Numri i identitetit)

Format: YYMMDDSSSC
- Y: decade letter or digit (0-9 then A-T), the year is
  1800 + 10 * index(letter) + second digit
- MM: month of birth, plus 50 for women
- DD: day of birth
- SSS: serial number
- C: check letter (algorithm not published, not verified)
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date


METADATA = IdMetadata(
    iso3166_alpha2="AL",
    min_length=10,
    max_length=10,
    parsable=True,
    checksum=False,
    regexp=re.compile(
        r"^(?P<decade>[0-9A-T])(?P<yy>\d)(?P<mm>[0156]\d)(?P<dd>[0-3]\d)"
        r"(?P<sn>\d{3})(?P<checksum>[A-W])$",
        re.ASCII,
    ),
    names=("Numri i identitetit", "Identity Number", "NID"),
    links=("https://en.wikipedia.org/wiki/Albanian_identity_card",),
)

DECADE_CODES = "0123456789ABCDEFGHIJKLMNOPQRST"


def _decode(match: re.Match) -> Optional[dict]:
    year = 1800 + 10 * DECADE_CODES.index(match.group("decade")) + int(match.group("yy"))
    month = int(match.group("mm"))
    gender = Gender.MALE
    if month > 50:
        month -= 50
        gender = Gender.FEMALE
    birth_date = to_date(year, month, int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": gender,
        "serial_number": match.group("sn"),
        "checksum": match.group("checksum"),
    }


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    return bool(match) and _decode(match) is not None


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number.upper()))
