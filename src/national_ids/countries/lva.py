"""
Latvia Personal Code (Personas kods)

Old format: DDMMYY-CSSSK, where C is the century (0: 1800s, 1: 1900s,
2: 2000s) and K the check digit, (1101 - weighted sum) mod 11 mod 10.
Codes issued since July 2017 start with 32 and carry no date or checksum.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="LV",
    min_length=11,
    max_length=12,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?:\d{6}-?[012]\d{4}|32\d{4}-?\d{5})$", re.ASCII),
    names=("Personas kods", "Personal Code"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Latvia",),
)

OLD_FORMAT_REGEXP = re.compile(
    r"^(?P<dd>\d{2})(?P<mm>\d{2})(?P<yy>\d{2})-?(?P<century>[012])(?P<sn>\d{3})(?P<checksum>\d)$",
    re.ASCII,
)
NEW_FORMAT_REGEXP = re.compile(r"^32\d{4}-?\d{5}$", re.ASCII)

WEIGHTS = [1, 6, 3, 7, 9, 10, 5, 8, 4, 2]


def checksum(id_number: str) -> Optional[int]:
    """Compute the check digit of an old-format personal code."""
    if not isinstance(id_number, str) or not OLD_FORMAT_REGEXP.fullmatch(id_number):
        return None
    digits = digits_of(id_number.replace("-", "")[:10])
    return (1101 - sum(d * w for d, w in zip(digits, WEIGHTS))) % 11 % 10


def _decode(match: re.Match) -> Optional[dict]:
    year = 1800 + 100 * int(match.group("century")) + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if NEW_FORMAT_REGEXP.fullmatch(id_number):
        return True
    match = OLD_FORMAT_REGEXP.fullmatch(id_number)
    if not match or _decode(match) is None:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    """Decode an old-format code; new-format codes carry no information."""
    if not validate(id_number):
        return None
    match = OLD_FORMAT_REGEXP.fullmatch(id_number)
    if not match:
        return None
    return _decode(match)
