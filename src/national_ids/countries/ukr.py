"""
Ukraine identification numbers

Individual Taxpayer Registration Number (RNOKPP), ten digits:
- first five: days since 1899-12-31 (the date of birth)
- ninth digit: odd for men
- tenth digit: weighted sum mod 11 mod 10 with weights -1,5,7,9,4,6,10,5,7

Legal entity code (EDRPOU), eight digits. The check digit is the weighted sum
of the first seven digits mod 11, with weights 1..7 when the first digit is
0-2 or 7-9 and 7,1..6 when it is 3-6. A result of 10 is recomputed with every
weight raised by 2, and a second 10 gives 0.
"""

import re
from datetime import date, timedelta
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="UA",
    min_length=8,
    max_length=10,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?:\d{10}|\d{8})$", re.ASCII),
    names=(
        "Taxpayer ID Number",
        "RNOKPP",
        "РНОКПП",
        "Legal Entity ID Number",
        "EDRPOU",
        "ЄДРПОУ",
    ),
    links=(
        "https://en.wikipedia.org/wiki/National_identification_number#Ukraine",
        "https://uk.wikipedia.org/wiki/%D0%9A%D0%BE%D0%B4_%D0%84%D0%94%D0%A0%D0%9F%D0%9E%D0%A3",
    ),
)

TAXPAYER_REGEXP = re.compile(
    r"^(?P<days>\d{5})(?P<sn>\d{3})(?P<gender>\d)(?P<checksum>\d)$", re.ASCII
)
ENTITY_REGEXP = re.compile(r"^\d{8}$", re.ASCII)

WEIGHTS = [-1, 5, 7, 9, 4, 6, 10, 5, 7]
ENTITY_WEIGHTS = [1, 2, 3, 4, 5, 6, 7]
ENTITY_ROTATED_WEIGHTS = [7, 1, 2, 3, 4, 5, 6]

EPOCH = date(1899, 12, 31)


def _uses_rotated_weights(first_digit: int) -> bool:
    return 3 <= first_digit <= 6


def _entity_checksum(id_number: str) -> int:
    digits = digits_of(id_number[:7])
    weights = ENTITY_ROTATED_WEIGHTS if _uses_rotated_weights(digits[0]) else ENTITY_WEIGHTS
    modulus = sum(d * w for d, w in zip(digits, weights)) % 11
    if modulus == 10:
        modulus = sum(d * (w + 2) for d, w in zip(digits, weights)) % 11
    return modulus % 10


def checksum(id_number: str) -> Optional[int]:
    """Compute the check digit of a taxpayer number or EDRPOU code.

    Examples:
        >>> checksum("2922001236")
        6
        >>> checksum("00032129")
        9
    """
    if not isinstance(id_number, str):
        return None
    if ENTITY_REGEXP.fullmatch(id_number):
        return _entity_checksum(id_number)
    if TAXPAYER_REGEXP.fullmatch(id_number):
        total = sum(d * w for d, w in zip(digits_of(id_number[:9]), WEIGHTS))
        return total % 11 % 10
    return None


def validate(id_number: str) -> bool:
    """Validate a Ukrainian taxpayer number or EDRPOU code.

    Examples:
        >>> validate("2922001236")
        True
        >>> validate("32855961")
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
    match = TAXPAYER_REGEXP.fullmatch(id_number)
    if match is None:
        return {
            "type": "legal_entity",
            "rotated_weights": _uses_rotated_weights(int(id_number[0])),
            "checksum": int(id_number[-1]),
        }
    return {
        "type": "taxpayer",
        "birth_date": EPOCH + timedelta(days=int(match.group("days"))),
        "gender": Gender.MALE if int(match.group("gender")) % 2 else Gender.FEMALE,
        "checksum": int(match.group("checksum")),
    }
