"""Australia Medicare Number."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="AU",
    min_length=10,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^[2-6]\d{3}[ -]?\d{5}[ -]?\d(?:[ /-]?\d)?$", re.ASCII),
    names=("Medicare Number", "Medicare Card Number"),
    links=("https://en.wikipedia.org/wiki/Medicare_card_(Australia)",),
)

WEIGHTS = [1, 3, 7, 9, 1, 3, 7, 9]


def checksum(id_number: str) -> Optional[int]:
    """Compute the check digit (ninth digit) of a Medicare number."""
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    digits = digits_of(normalize(id_number))
    return sum(d * w for d, w in zip(digits[:8], WEIGHTS)) % 10


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(normalize(id_number)[8])


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    number = normalize(id_number)
    return {
        "card_number": number[:8],
        "checksum": int(number[8]),
        "issue_number": int(number[9]),
        "individual_reference": int(number[10]) if len(number) == 11 else None,
    }
