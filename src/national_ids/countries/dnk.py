"""
Denmark Personal Identity Number (CPR-nummer)

Format: DDMMYY-SSSS
The first digit of the serial determines the century:
- 0-3: 1900-1999
- 4, 9: 2000-2036 for YY 00-36, otherwise 1937-1999
- 5-8: 2000-2057 for YY 00-57, otherwise 1858-1899
The last digit is odd for men and even for women.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="DK",
    min_length=10,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<dd>\d{2})(?P<mm>\d{2})(?P<yy>\d{2})-?(?P<sn>\d{4})$", re.ASCII),
    names=("CPR-nummer", "Personnummer", "Personal Identity Number"),
    links=("https://en.wikipedia.org/wiki/Personal_identification_number_(Denmark)",),
)

WEIGHTS = [4, 3, 2, 7, 6, 5, 4, 3, 2, 1]


def _year(yy: int, century_digit: int) -> int:
    if century_digit <= 3:
        return 1900 + yy
    if century_digit in (4, 9):
        return (2000 if yy <= 36 else 1900) + yy
    return (2000 if yy <= 57 else 1800) + yy


def _decode(match: re.Match) -> Optional[dict]:
    sn = match.group("sn")
    year = _year(int(match.group("yy")), int(sn[0]))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if int(sn[3]) % 2 else Gender.FEMALE,
        "serial_number": sn,
    }


def checksum(id_number: str) -> Optional[int]:
    """Compute the control digit, or None when no digit can satisfy mod 11.

    Examples:
        >>> checksum("070761-4285")
        5
    """
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    digits = digits_of(id_number.replace("-", ""))
    check = weighted_modulus_digit(digits[:9], WEIGHTS[:9], 11) % 11
    return None if check == 10 else check


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _decode(match) is None:
        return False
    digits = digits_of(id_number.replace("-", ""))
    return weighted_modulus_digit(digits, WEIGHTS, 11, True) == 0


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number))
