"""
Kazakhstan Individual Identification Number (ЖСН/ИИН)

Format: YYMMDDCSSSSK
C encodes century and gender: 1/2 for 1800s, 3/4 for 1900s, 5/6 for 2000s,
odd for men. K uses weights 1-11 modulo 11; a result of 10 is recomputed
with weights 3-11,1,2 and a second 10 makes the number invalid.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="KZ",
    min_length=12,
    max_length=12,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<c>[1-6])(?P<sn>\d{4})(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Жеке сәйкестендіру нөмірі", "Индивидуальный идентификационный номер", "IIN"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Kazakhstan",),
)

FIRST_WEIGHTS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
SECOND_WEIGHTS = [3, 4, 5, 6, 7, 8, 9, 10, 11, 1, 2]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    digits = digits_of(id_number[:11])
    modulus = sum(d * w for d, w in zip(digits, FIRST_WEIGHTS)) % 11
    if modulus == 10:
        modulus = sum(d * w for d, w in zip(digits, SECOND_WEIGHTS)) % 11
    return None if modulus == 10 else modulus


def _decode(match: re.Match) -> Optional[dict]:
    c = int(match.group("c"))
    year = 1700 + (c + 1) // 2 * 100 + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if c % 2 else Gender.FEMALE,
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
