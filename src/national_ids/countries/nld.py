"""Netherlands citizen service number (Burgerservicenummer, BSN)."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="NL",
    min_length=9,
    max_length=9,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^\d{9}$", re.ASCII),
    names=("Burgerservicenummer", "BSN", "Citizen Service Number"),
    links=("https://nl.wikipedia.org/wiki/Burgerservicenummer",),
)

WEIGHTS = [9, 8, 7, 6, 5, 4, 3, 2]


def checksum(id_number: str) -> Optional[int]:
    """Compute the "11-test" check digit, or None if it would be 10."""
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    modulus = weighted_modulus_digit(digits_of(number[:8]), WEIGHTS, 11, True)
    return None if modulus == 10 else modulus


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
    return checksum(number) == int(number[8])
