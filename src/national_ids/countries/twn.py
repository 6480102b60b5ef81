"""
Taiwan National Identification Card Number

Format: LGNNNNNNNC
- L: registration location letter, expanded to a two-digit code
- G: 1 for men, 2 for women
- C: check digit, weights 1,9,8,7,6,5,4,3,2,1 over the expanded digits
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="TW",
    min_length=10,
    max_length=10,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<location>[A-Z])(?P<gender>[12])(?P<sn>\d{7})(?P<checksum>\d)$", re.ASCII),
    names=("National ID Number", "國民身分證統一編號", "身分證字號"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Taiwan",),
)

# Letters are not assigned in alphabetical order
LOCATION_CODES = {
    "A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15, "G": 16, "H": 17,
    "I": 34, "J": 18, "K": 19, "L": 20, "M": 21, "N": 22, "O": 35, "P": 23,
    "Q": 24, "R": 25, "S": 26, "T": 27, "U": 28, "V": 29, "W": 32, "X": 30,
    "Y": 31, "Z": 33,
}

WEIGHTS = [1, 9, 8, 7, 6, 5, 4, 3, 2, 1]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    numbers = digits_of(str(LOCATION_CODES[id_number[0]])) + digits_of(id_number[1:9])
    total = sum(n * w for n, w in zip(numbers, WEIGHTS))
    return (10 - total % 10) % 10


def validate(id_number: str) -> bool:
    """Validate a Taiwanese national ID.

    Examples:
        >>> validate("A123456789")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(id_number[-1])


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "location": match.group("location"),
        "gender": Gender.MALE if match.group("gender") == "1" else Gender.FEMALE,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }
