"""
Romania Personal Numeric Code (CNP)

Format: SYYMMDDJJNNNC
- S: gender and century (1/2: 1900s, 3/4: 1800s, 5/6: 2000s, 7/8: residents),
  odd for men
- JJ: county code (01-52, or 99 for foreign-born)
- C: weighted sum mod 11 with weights 2,7,9,1,4,6,3,5,8,2,7,9; 10 becomes 1
"""

import re
from typing import Optional

from national_ids.models import Citizenship, Gender, IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="RO",
    min_length=13,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<gender_century>\d)(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})"
        r"(?P<location>\d{2})(?P<sn>\d{3})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Personal Numerical Code", "Cod Numeric Personal", "CNP"),
    links=(
        "https://en.wikipedia.org/wiki/National_identification_number#Romania",
        "https://en.wikipedia.org/wiki/Romanian_identity_card",
    ),
)

WEIGHTS = [2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9]

CENTURIES = {1: 1900, 2: 1900, 3: 1800, 4: 1800, 5: 2000, 6: 2000}


def _year(gender_century: int, yy: int) -> int:
    if gender_century in CENTURIES:
        return CENTURIES[gender_century] + yy
    # Residents do not encode the century
    return (2000 if yy < 50 else 1900) + yy


def _decode(match: re.Match) -> Optional[dict]:
    gender_century = int(match.group("gender_century"))
    if not 1 <= gender_century <= 8:
        return None
    location = int(match.group("location"))
    if not (1 <= location <= 52 or location == 99):
        return None
    yy = int(match.group("yy"))
    birth_date = to_date(_year(gender_century, yy), int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "location": match.group("location"),
        "gender": Gender.MALE if gender_century % 2 else Gender.FEMALE,
        "citizenship": Citizenship.CITIZEN if gender_century < 7 else Citizenship.RESIDENT,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    modulus = weighted_modulus_digit(digits_of(id_number[:12]), WEIGHTS, 11, True)
    return 1 if modulus == 10 else modulus


def validate(id_number: str) -> bool:
    """Validate a Romanian CNP.

    Examples:
        >>> validate("1800101123450")
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
