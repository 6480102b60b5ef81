"""
Sweden Personal Identity Number (personnummer)

Format: [YY]YYMMDD-NNNC or YYMMDD+NNNC
- '+' marks a person aged 100 or more when only two year digits are given
- NNN: birth number, odd for men
- C: Luhn check digit over the ten-digit form YYMMDDNNN

Coordination numbers (samordningsnummer) add 60 to the day.
"""

import re
from datetime import date
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.checksums import luhn_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="SE",
    min_length=10,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?:(?P<yyyy>\d{4})|(?P<yy>\d{2}))(?P<mm>\d{2})(?P<dd>\d{2})"
        r"(?P<sep>[+-]?)(?!000)(?P<birth_number>\d{3})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Personal Identity Number", "personnummer"),
    links=(
        "https://en.wikipedia.org/wiki/Personal_identity_number_(Sweden)",
        "https://www.skatteverket.se/",
    ),
)

COORDINATION_OFFSET = 60


def _year(match: re.Match, today: Optional[date] = None) -> int:
    if match.group("yyyy"):
        return int(match.group("yyyy"))
    today = today or date.today()
    base = today.year - 100 if match.group("sep") == "+" else today.year
    yy = int(match.group("yy"))
    return base - (base - yy) % 100


def _decode(match: re.Match) -> Optional[dict]:
    day = int(match.group("dd"))
    coordination = day > COORDINATION_OFFSET
    if coordination:
        day -= COORDINATION_OFFSET
    birth_date = to_date(_year(match), int(match.group("mm")), day)
    if birth_date is None:
        return None
    birth_number = match.group("birth_number")
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if int(birth_number) % 2 else Gender.FEMALE,
        "serial_number": birth_number,
        "coordination_number": coordination,
        "checksum": int(match.group("checksum")),
    }


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return None
    yy = (match.group("yyyy") or match.group("yy"))[-2:]
    payload = yy + match.group("mm") + match.group("dd") + match.group("birth_number")
    return luhn_digit(digits_of(payload), True)


def validate(id_number: str) -> bool:
    """Validate a Swedish personnummer.

    Examples:
        >>> validate("811218-9876")
        True
        >>> validate("19811218-9876")
        True
    """
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
