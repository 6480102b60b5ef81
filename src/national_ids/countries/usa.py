"""
United States Social Security Number

Format: AAA-GG-SSSS (area, group, serial). Dashes are required.
Area 000, 666 and 900-999 are never assigned, nor are group 00 and
serial 0000. There is no check digit.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="US",
    min_length=11,
    max_length=11,
    parsable=True,
    checksum=False,
    regexp=re.compile(
        r"^(?!666|000|9\d{2})(?P<area>\d{3})-(?!00)(?P<group>\d{2})-(?!0{4})(?P<serial>\d{4})$",
        re.ASCII,
    ),
    names=("Social Security Number", "SSN"),
    links=("https://en.wikipedia.org/wiki/Social_Security_number",),
)


def validate(id_number: str) -> bool:
    """Validate a US Social Security Number.

    Examples:
        >>> validate("123-45-6789")
        True
        >>> validate("000-45-6789")
        False
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))


def parse(id_number: str) -> Optional[dict]:
    """Split a valid SSN into its area, group and serial numbers."""
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "area_number": match.group("area"),
        "group_number": match.group("group"),
        "serial_number": match.group("serial"),
    }
