"""
Lithuania Personal Code (Asmens kodas)

Format: GYYMMDDSSSC
G encodes century and gender: 1/2 for 1800s, 3/4 for 1900s, 5/6 for 2000s,
odd for men. The check digit uses two weight rounds modulo 11.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="LT",
    min_length=11,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<g>[1-6])(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{3})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Asmens kodas", "Personal Code"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Lithuania",),
)

FIRST_WEIGHTS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 1]
SECOND_WEIGHTS = [3, 4, 5, 6, 7, 8, 9, 1, 2, 3]


def two_round_mod11(digits: list[int]) -> int:
    """Baltic two-round modulus 11 check digit (also used by Estonia)."""
    modulus = sum(d * w for d, w in zip(digits, FIRST_WEIGHTS)) % 11
    if modulus < 10:
        return modulus
    modulus = sum(d * w for d, w in zip(digits, SECOND_WEIGHTS)) % 11
    return 0 if modulus == 10 else modulus


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return two_round_mod11(digits_of(id_number[:10]))


def _decode(match: re.Match) -> Optional[dict]:
    g = int(match.group("g"))
    year = 1700 + (g + 1) // 2 * 100 + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if g % 2 else Gender.FEMALE,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }


def validate(id_number: str) -> bool:
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
