"""
Singapore NRIC / FIN

Format: PNNNNNNNC
- P: prefix. S/T for citizens and permanent residents born before/after 2000,
  F/G/M for foreigners.
- C: check letter from a weighted sum (weights 2,7,6,5,4,3,2) mod 11,
  offset by 4 for T/G and by 3 for M.
"""

import re
from typing import Optional

from national_ids.models import Citizenship, IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="SG",
    min_length=9,
    max_length=9,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<prefix>[STFGM])(?P<sn>\d{7})(?P<checksum>[A-Z])$", re.ASCII),
    names=("NRIC", "FIN", "National Registration Identity Card", "Foreign Identification Number"),
    links=(
        "https://en.wikipedia.org/wiki/National_Registration_Identity_Card",
        "https://www.ica.gov.sg/",
    ),
)

WEIGHTS = [2, 7, 6, 5, 4, 3, 2]

PREFIX_OFFSETS = {"S": 0, "F": 0, "T": 4, "G": 4, "M": 3}

CHECK_LETTERS = {
    "S": "JZIHGFEDCBA",
    "T": "JZIHGFEDCBA",
    "F": "XWUTRQPNMLK",
    "G": "XWUTRQPNMLK",
    "M": "KLJNPQRTUWX",
}


def checksum(id_number: str) -> Optional[str]:
    """Compute the check letter of an NRIC/FIN."""
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return None
    prefix = match.group("prefix")
    total = sum(int(d) * w for d, w in zip(match.group("sn"), WEIGHTS))
    return CHECK_LETTERS[prefix][(total + PREFIX_OFFSETS[prefix]) % 11]


def validate(id_number: str) -> bool:
    """Validate a Singapore NRIC or FIN.

    Examples:
        >>> validate("S1234567D")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    number = id_number.upper()
    if not METADATA.regexp.fullmatch(number):
        return False
    return checksum(number) == number[-1]


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    prefix = match.group("prefix")
    return {
        "citizenship": Citizenship.CITIZEN if prefix in "ST" else Citizenship.FOREIGN,
        "prefix": prefix,
        "serial_number": match.group("sn"),
        "checksum": match.group("checksum"),
    }
