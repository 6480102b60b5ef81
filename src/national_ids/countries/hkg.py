"""
Hong Kong Identity Card Number

Format: X123456(A) where the prefix has one or two letters and the check
character in brackets is a digit or A. Letters count 10-35 and a missing
second prefix letter counts as 36; weights run from 9 down to 2 and the
check value is 11 - (sum mod 11), with 10 written as A and 11 as 0.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="HK",
    min_length=8,
    max_length=11,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^(?P<prefix>[A-Z]{1,2})(?P<digits>\d{6})\(?(?P<checksum>[\dA])\)?$", re.ASCII),
    names=("香港身份證", "Hong Kong Identity Card", "HKID"),
    links=("https://en.wikipedia.org/wiki/Hong_Kong_identity_card",),
)


def _value(char: str) -> int:
    if char == " ":
        return 36
    if char.isdigit():
        return int(char)
    return ord(char) - 55


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return None
    body = match.group("prefix").rjust(2) + match.group("digits")
    total = sum(_value(char) * (9 - i) for i, char in enumerate(body))
    check = 11 - total % 11
    if check == 10:
        return "A"
    if check == 11:
        return "0"
    return str(check)


def validate(id_number: str) -> bool:
    """Validate a Hong Kong identity card number.

    Examples:
        >>> validate("A123456(3)")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return False
    return checksum(id_number) == match.group("checksum")
