"""Croatia personal identification number (OIB): eleven digits, ISO 7064 MOD 11,10."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import mn_modulus_digit, modulus_overflow_mod10
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="HR",
    min_length=11,
    max_length=11,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^\d{11}$", re.ASCII),
    names=("Osobni identifikacijski broj", "OIB", "Personal ID Number"),
    links=("https://en.wikipedia.org/wiki/Personal_identification_number_(Croatia)",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return modulus_overflow_mod10(mn_modulus_digit(digits_of(id_number[:10]), 10, 11))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(id_number[10])
