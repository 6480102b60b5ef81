"""
Hungary Personal ID Number (Személyi azonosító)

Format: G-YYMMDD-SSSC
G encodes gender, century and citizenship:
- 1/2: citizens born 1900-1999
- 3/4: citizens born 2000-2099
- 5/6: citizens born 1800-1899
- 7/8: foreigners born 1900-1999
Odd values are male. The check digit is the weighted sum (weights 1-10)
modulo 11 and must be below 10.
"""

import re
from typing import Optional

from national_ids.models import Citizenship, Gender, IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="HU",
    min_length=11,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<g>[1-8])(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{3})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Személyi azonosító", "Személyi szám", "Personal ID Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Hungary",),
)

WEIGHTS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
CENTURIES = {1: 1900, 2: 1900, 3: 2000, 4: 2000, 5: 1800, 6: 1800, 7: 1900, 8: 1900}


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    modulus = weighted_modulus_digit(digits_of(number[:10]), WEIGHTS, 11, True)
    return None if modulus == 10 else modulus


def _decode(match: re.Match) -> Optional[dict]:
    g = int(match.group("g"))
    year = CENTURIES[g] + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if g % 2 else Gender.FEMALE,
        "citizenship": Citizenship.FOREIGN if g >= 7 else Citizenship.CITIZEN,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }


def validate(id_number: str) -> bool:
    """Validate a Hungarian personal ID number, dashes allowed.

    Examples:
        >>> validate("1-800101-0016")
        True
        >>> validate("18001010017")
        False
    """
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    number = normalize(id_number)
    match = METADATA.regexp.fullmatch(number)
    if not match or _decode(match) is None:
        return False
    return checksum(number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(normalize(id_number)))
