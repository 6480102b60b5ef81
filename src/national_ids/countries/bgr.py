"""
Bulgaria Uniform Civil Number (ЕГН)

Format: YYMMDDSSSC
The month carries the century: +20 for 1800s, +40 for 2000s. The ninth
digit is even for men.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="BG",
    min_length=10,
    max_length=10,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{3})(?P<checksum>\d)$", re.ASCII),
    names=("Единен граждански номер", "EGN", "Uniform Civil Number"),
    links=("https://en.wikipedia.org/wiki/Unique_citizenship_number",),
)

WEIGHTS = [2, 4, 8, 5, 10, 9, 7, 3, 6]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    modulus = sum(d * w for d, w in zip(digits_of(id_number[:9]), WEIGHTS)) % 11
    return 0 if modulus == 10 else modulus


def _decode(match: re.Match) -> Optional[dict]:
    month = int(match.group("mm"))
    if month > 40:
        century, month = 2000, month - 40
    elif month > 20:
        century, month = 1800, month - 20
    else:
        century = 1900
    birth_date = to_date(century + int(match.group("yy")), month, int(match.group("dd")))
    if birth_date is None:
        return None
    sn = match.group("sn")
    return {
        "birth_date": birth_date,
        "gender": Gender.FEMALE if int(sn[2]) % 2 else Gender.MALE,
        "serial_number": sn,
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
