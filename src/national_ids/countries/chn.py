"""
China Resident Identity Card Number

Format: RRRRRRYYYYMMDDSSSC (6 region + 8 birthdate + 3 sequence + 1 checksum)
The check character follows ISO 7064:1983 MOD 11-2 and may be X, which is
accepted in lower case too. Odd sequence numbers are male.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="CN",
    min_length=18,
    max_length=18,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<location>[1-9]\d{5})(?P<yyyy>(?:18|19|20)\d{2})(?P<mm>\d{2})(?P<dd>\d{2})"
        r"(?P<sn>\d{3})(?P<checksum>[\dX])$",
        re.ASCII,
    ),
    names=("居民身份证", "Resident Identity Card Number"),
    links=("https://en.wikipedia.org/wiki/Resident_Identity_Card",),
)

# Weights for checksum calculation (ISO 7064:1983 MOD 11-2)
WEIGHTS = [7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2]

# Checksum mapping
CHECKSUM_MAP = "10X98765432"


def checksum(id_number: str) -> Optional[str]:
    """Compute the check character from the first 17 digits.

    Examples:
        >>> checksum("11010219840406970X")
        'X'
    """
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number.upper()):
        return None
    total = sum(d * w for d, w in zip(digits_of(id_number[:17]), WEIGHTS))
    return CHECKSUM_MAP[total % 11]


def _birth_date(match: re.Match):
    return to_date(int(match.group("yyyy")), int(match.group("mm")), int(match.group("dd")))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    id_number = id_number.upper()
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _birth_date(match) is None:
        return False
    return checksum(id_number) == match.group("checksum")


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    return {
        "location": match.group("location"),
        "birth_date": _birth_date(match),
        "gender": Gender.MALE if int(match.group("sn")) % 2 else Gender.FEMALE,
        "serial_number": match.group("sn"),
        "checksum": match.group("checksum"),
    }
