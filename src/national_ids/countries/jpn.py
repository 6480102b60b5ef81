"""
Japan Individual Number (My Number)

Twelve digits. The check digit is computed from the first eleven digits with
weights 6,5,4,3,2,7,6,5,4,3,2 (left to right): remainders 0 and 1 give 0,
otherwise 11 - remainder.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="JP",
    min_length=12,
    max_length=14,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^\d{12}$", re.ASCII),
    names=("個人番号", "マイナンバー", "My Number", "Individual Number"),
    links=("https://en.wikipedia.org/wiki/Individual_Number",),
)

WEIGHTS = [6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    remainder = weighted_modulus_digit(digits_of(number[:11]), WEIGHTS, 11, True)
    return 0 if remainder <= 1 else 11 - remainder


def validate(id_number: str) -> bool:
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return False
    return checksum(number) == int(number[11])
