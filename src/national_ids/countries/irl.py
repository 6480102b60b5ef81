"""
Ireland Personal Public Service Number (PPSN)

Seven digits, a check letter and an optional second letter. The check
letter is the weighted sum (weights 8-2 over the digits, 9 for the second
letter) modulo 23, mapped onto W, A-V.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import letter_to_number
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="IE",
    min_length=8,
    max_length=9,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^(?P<number>\d{7})(?P<checksum>[A-W])(?P<suffix>[A-IW]?)$", re.ASCII),
    names=("Personal Public Service Number", "PPS Number", "PPSN"),
    links=("https://en.wikipedia.org/wiki/Personal_Public_Service_Number",),
)

CHECK_LETTERS = "WABCDEFGHIJKLMNOPQRSTUV"


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return None
    digits = digits_of(match.group("number"))
    total = sum(d * (8 - i) for i, d in enumerate(digits))
    suffix = match.group("suffix")
    if suffix and suffix != "W":
        total += 9 * letter_to_number(suffix)
    return CHECK_LETTERS[total % 23]


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return False
    return checksum(id_number) == match.group("checksum")
