"""
Moldova Personal Code (IDNP)

Thirteen digits; the last is the weighted sum of the first twelve with the
repeating weights 7, 3, 1, taken mod 10.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="MD",
    min_length=13,
    max_length=13,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^\d{13}$", re.ASCII),
    names=("Personal Code", "IDNP", "Cod personal"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Moldova",),
)

WEIGHTS = [7, 3, 1] * 4


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return weighted_modulus_digit(digits_of(id_number[:12]), WEIGHTS, 10, True)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(id_number[-1])
