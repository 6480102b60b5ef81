"""
Luxembourg National Identification Number (Matricule)

Format: YYYYMMDDSSSLV
The first check digit (L) is a Luhn digit over the first eleven digits; the
second (V) is a Verhoeff check digit over the same eleven digits.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import luhn_digit, verhoeff_check
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="LU",
    min_length=13,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<yyyy>\d{4})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{3})(?P<checksum>\d{2})$",
        re.ASCII,
    ),
    names=("Matricule", "Numéro d'identification national", "National Identification Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Luxembourg",),
)


def checksum(id_number: str) -> Optional[int]:
    """Compute the Luhn check digit (the twelfth digit)."""
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    return luhn_digit(digits_of(number[:11]), True)


def validate(id_number: str) -> bool:
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    number = normalize(id_number)
    match = METADATA.regexp.fullmatch(number)
    if not match:
        return False
    if to_date(int(match.group("yyyy")), int(match.group("mm")), int(match.group("dd"))) is None:
        return False
    if checksum(number) != int(number[11]):
        return False
    return verhoeff_check(digits_of(number[:11] + number[12]))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(normalize(id_number))
    return {
        "birth_date": to_date(int(match.group("yyyy")), int(match.group("mm")), int(match.group("dd"))),
        "serial_number": match.group("sn"),
        "checksum": match.group("checksum"),
    }
