"""
Estonia Personal ID Number (Isikukood)

Format: GYYMMDDSSSC
G encodes century and gender: 1/2 for 1800s, 3/4 for 1900s, 5/6 for 2000s,
7/8 for 2100s, odd for men. The check digit uses the same two-round
modulus 11 scheme as Lithuania.
"""

import re
from typing import Optional

from national_ids.countries.ltu import two_round_mod11
from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="EE",
    min_length=11,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<g>[1-8])(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{3})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Isikukood", "Personal ID Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Estonia",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return two_round_mod11(digits_of(id_number[:10]))


def _decode(match: re.Match) -> Optional[dict]:
    g = int(match.group("g"))
    year = 1800 + (g - 1) // 2 * 100 + int(match.group("yy"))
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
