"""
Finland Personal Identity Code (Henkilötunnus)

Format: DDMMYYCZZZQ
- C: century sign, + for 1800s, - and U-Y for 1900s, A-F for 2000s
- ZZZ: individual number, odd for men
- Q: check character, DDMMYYZZZ mod 31 looked up in CHECK_CHARACTERS
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date


METADATA = IdMetadata(
    iso3166_alpha2="FI",
    min_length=11,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<dd>\d{2})(?P<mm>\d{2})(?P<yy>\d{2})(?P<sign>[-+A-FU-Y])"
        r"(?P<sn>\d{3})(?P<checksum>[\dA-Y])$",
        re.ASCII,
    ),
    names=("Henkilötunnus", "Personbeteckning", "Personal Identity Code"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Finland",),
)

CHECK_CHARACTERS = "0123456789ABCDEFHJKLMNPRSTUVWXY"


def _century(sign: str) -> int:
    if sign == "+":
        return 1800
    if sign in "ABCDEF":
        return 2000
    return 1900


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return None
    number = match.group("dd") + match.group("mm") + match.group("yy") + match.group("sn")
    return CHECK_CHARACTERS[int(number) % 31]


def _decode(match: re.Match) -> Optional[dict]:
    year = _century(match.group("sign")) + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if int(match.group("sn")) % 2 else Gender.FEMALE,
        "serial_number": match.group("sn"),
        "checksum": match.group("checksum"),
    }


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match or _decode(match) is None:
        return False
    return checksum(id_number) == match.group("checksum")


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number.upper()))
