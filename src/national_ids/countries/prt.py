"""
Portugal identification numbers

Citizen Card (Cartão de Cidadão): NNNNNNNN C VV K
- NNNNNNNN: civil identification number
- C: check digit of the civil identification number
- VV: two-character version
- K: check digit over the preceding eleven characters

K is a Luhn digit over an alphanumeric alphabet (0-9 then A=10 ... Z=35),
doubling every other character from the right and subtracting 9 from
doubled values above 9.

Tax Identification Number (NIF): nine digits. The last digit is
11 - (sum of the first eight digits weighted 9..2) mod 11, with remainders
0 and 1 giving 0.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="PT",
    min_length=9,
    max_length=14,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?:\d{8}\s?\d\s?[A-Z0-9]{2}\d|\d{9})$", re.ASCII),
    names=(
        "Citizen Card",
        "Cartão de Cidadão",
        "CC",
        "NIF",
        "Número de Identificação Fiscal",
        "Tax Identification Number",
    ),
    links=(
        "https://en.wikipedia.org/wiki/National_identification_number#Portugal",
        "https://www.portaldocidadao.pt/",
    ),
)

CITIZEN_CARD_REGEXP = re.compile(
    r"^(?P<number>\d{8})\s?(?P<check>\d)\s?(?P<version>[A-Z0-9]{2})(?P<checksum>\d)$",
    re.ASCII,
)
NIF_REGEXP = re.compile(r"^\d{9}$", re.ASCII)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

NIF_WEIGHTS = [9, 8, 7, 6, 5, 4, 3, 2]


def _clean(id_number: str) -> str:
    return normalize(id_number).upper()


def _citizen_card_checksum(number: str) -> int:
    total = 0
    for index, char in enumerate(reversed(number[:11])):
        value = ALPHABET.index(char)
        if index % 2 == 0:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return (10 - total) % 10


def _nif_checksum(number: str) -> int:
    remainder = sum(d * w for d, w in zip(digits_of(number[:8]), NIF_WEIGHTS)) % 11
    return 0 if remainder < 2 else 11 - remainder


def checksum(id_number: str) -> Optional[int]:
    """Compute the final check digit of a citizen card number or NIF.

    Examples:
        >>> checksum("123456789ZZ1")
        1
        >>> checksum("123456789")
        9
    """
    if not isinstance(id_number, str):
        return None
    number = _clean(id_number)
    if NIF_REGEXP.fullmatch(number):
        return _nif_checksum(number)
    if CITIZEN_CARD_REGEXP.fullmatch(number):
        return _citizen_card_checksum(number)
    return None


def validate(id_number: str) -> bool:
    """Validate a Portuguese citizen card number or NIF.

    Examples:
        >>> validate("000000000ZZ4")
        True
        >>> validate("12345678 9 ZZ1")
        True
        >>> validate("501964843")
        True
    """
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    number = _clean(id_number)
    if not METADATA.regexp.fullmatch(number):
        return False
    return checksum(number) == int(number[-1])


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    number = _clean(id_number)
    match = CITIZEN_CARD_REGEXP.fullmatch(number)
    if match is None:
        return {"type": "tax_number", "checksum": int(number[-1])}
    return {
        "type": "citizen_card",
        "civil_number": match.group("number"),
        "civil_check_digit": int(match.group("check")),
        "version": match.group("version"),
        "checksum": int(match.group("checksum")),
    }
