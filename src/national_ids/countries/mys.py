"""
Malaysia National Registration Identity Card Number (NRIC, MyKad)

Format: YYMMDD-PB-###G
- YYMMDD: date of birth, resolved to the most recent year not in the future
- PB: place of birth, some codes are never issued
- G: last digit, odd for men
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import resolve_two_digit_year, to_date


METADATA = IdMetadata(
    iso3166_alpha2="MY",
    min_length=12,
    max_length=14,
    parsable=True,
    checksum=False,
    regexp=re.compile(
        r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})-?(?P<pb>\d{2})-?(?P<sn>\d{3})(?P<gender>\d)$",
        re.ASCII,
    ),
    names=("National Registration Identity Card Number", "NRIC", "MyKad"),
    links=("https://en.wikipedia.org/wiki/Malaysian_identity_card",),
)

# Place-of-birth codes that are not allocated
INVALID_PLACE_OF_BIRTH = frozenset(
    ["00", "17", "18", "19", "20", "69", "70", "73", "80", "81", "94", "95", "96", "97"]
)


def _decode(match: re.Match) -> Optional[dict]:
    if match.group("pb") in INVALID_PLACE_OF_BIRTH:
        return None
    year = resolve_two_digit_year(int(match.group("yy")))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "place_of_birth": match.group("pb"),
        "gender": Gender.MALE if int(match.group("gender")) % 2 else Gender.FEMALE,
        "serial_number": match.group("sn") + match.group("gender"),
    }


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    return bool(match) and _decode(match) is not None


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number))
