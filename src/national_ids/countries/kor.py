"""
South Korea Resident Registration Number

Format: YYMMDD-GSSSSSS
G encodes century, gender and nationality:
- 9/0: 1800s, 1/2: 1900s, 3/4: 2000s (citizens)
- 5/6: 1900s, 7/8: 2000s (foreigners)
Odd values are male. Numbers issued since October 2020 have a random
serial, so the legacy check digit is not verified.
"""

import re
from typing import Optional

from national_ids.models import Citizenship, Gender, IdMetadata
from national_ids.utils.dates import to_date


METADATA = IdMetadata(
    iso3166_alpha2="KR",
    min_length=14,
    max_length=14,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})-(?P<g>\d)(?P<sn>\d{6})$", re.ASCII),
    names=("주민등록번호", "Resident Registration Number", "RRN"),
    links=("https://en.wikipedia.org/wiki/Resident_registration_number",),
)

CENTURIES = {9: 1800, 0: 1800, 1: 1900, 2: 1900, 3: 2000, 4: 2000, 5: 1900, 6: 1900, 7: 2000, 8: 2000}


def _decode(match: re.Match) -> Optional[dict]:
    g = int(match.group("g"))
    year = CENTURIES[g] + int(match.group("yy"))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if g % 2 else Gender.FEMALE,
        "citizenship": Citizenship.FOREIGN if 5 <= g <= 8 else Citizenship.CITIZEN,
        "serial_number": match.group("sn"),
    }


def validate(id_number: str) -> bool:
    """Validate a resident registration number; the dash is required.

    Examples:
        >>> validate("800101-1234567")
        True
        >>> validate("8001011234567")
        False
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    return bool(match) and _decode(match) is not None


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number))
