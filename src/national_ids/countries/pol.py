"""
Poland PESEL

Format: YYMMDDSSSSC
The month carries the century: +80 for 1800s, +0 for 1900s, +20 for 2000s,
+40 for 2100s and +60 for 2200s. The tenth digit is odd for men.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="PL",
    min_length=11,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{4})(?P<checksum>\d)$", re.ASCII),
    names=("PESEL", "Powszechny Elektroniczny System Ewidencji Ludności"),
    links=("https://en.wikipedia.org/wiki/PESEL",),
)

WEIGHTS = [1, 3, 7, 9, 1, 3, 7, 9, 1, 3]

# Month offset (tens) to century
CENTURIES = {8: 1800, 0: 1900, 2: 2000, 4: 2100, 6: 2200}


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    total = sum(d * w for d, w in zip(digits_of(id_number[:10]), WEIGHTS))
    return (10 - total % 10) % 10


def _decode(match: re.Match) -> Optional[dict]:
    month = int(match.group("mm"))
    offset = month // 20 * 2
    century = CENTURIES.get(offset)
    if century is None:
        return None
    birth_date = to_date(century + int(match.group("yy")), month - offset * 10, int(match.group("dd")))
    if birth_date is None:
        return None
    sn = match.group("sn")
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if int(sn[3]) % 2 else Gender.FEMALE,
        "serial_number": sn,
        "checksum": int(match.group("checksum")),
    }


def validate(id_number: str) -> bool:
    """Validate a PESEL number.

    Examples:
        >>> validate("44051401458")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _decode(match) is None:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number))
