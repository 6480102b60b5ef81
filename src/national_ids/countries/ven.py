"""
Venezuela Identity Card (Cédula de Identidad)

A type letter followed by 7-9 digits, optionally grouped in thousands with dots:
V (Venezuelan), E (foreigner), J (legal entity) or G (government).
"""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="VE",
    min_length=8,
    max_length=13,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?P<type>[VEJG])[-\s]?(?P<number>\d{1,3}(?:\.?\d{3}){2})$", re.ASCII),
    names=("Cédula de Identidad", "CI"),
    links=("https://en.wikipedia.org/wiki/Venezuelan_identity_card",),
)

TYPES = {
    "V": "Venezuelan",
    "E": "Foreign",
    "J": "Legal Entity",
    "G": "Government",
}


def validate(id_number: str) -> bool:
    """Validate a Venezuelan cédula.

    Examples:
        >>> validate("V-12345678")
        True
        >>> validate("E-12.345.678")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number.upper()))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    return {
        "type": TYPES[match.group("type")],
        "number": match.group("number").replace(".", ""),
    }
