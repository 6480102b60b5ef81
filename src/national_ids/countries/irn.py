"""
Iran National ID Number (kart-e meli)

Ten digits, written NNN-NNNNNN-C. With r the weighted sum of the first nine
digits (weights 10..2) mod 11, the check digit is r when r < 2 and 11 - r
otherwise. Numbers made of a single repeated digit are rejected.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="IR",
    min_length=10,
    max_length=12,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^\d{3}-?\d{6}-?\d$", re.ASCII),
    names=("National ID Number", "kart-e-meli", "کارت ملی"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Iran",),
)

WEIGHTS = [10, 9, 8, 7, 6, 5, 4, 3, 2]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    remainder = weighted_modulus_digit(digits_of(normalize(id_number)[:9]), WEIGHTS, 11, True)
    return remainder if remainder < 2 else 11 - remainder


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    number = normalize(id_number)
    if len(set(number)) == 1:
        return False
    return checksum(id_number) == int(number[-1])
