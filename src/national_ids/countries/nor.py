"""
Norway National Identity Number (Fødselsnummer)

Format: DDMMYYIIIKK
The individual number III determines the century:
- 000-499: 1900-1999
- 500-749 with YY 54-99: 1854-1899
- 900-999 with YY 40-99: 1940-1999
- otherwise: 2000-2039
Its last digit is odd for men. The two control digits K1 and K2 are checked
by requiring both weighted sums to be divisible by 11.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="NO",
    min_length=11,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<dd>\d{2})(?P<mm>\d{2})(?P<yy>\d{2})(?P<individual>\d{3})(?P<checksum>\d{2})$",
        re.ASCII,
    ),
    names=("Fødselsnummer", "National Identity Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Norway",),
)

FIRST_WEIGHTS = [3, 7, 6, 1, 8, 9, 4, 5, 2, 1]
SECOND_WEIGHTS = [5, 4, 3, 2, 7, 6, 5, 4, 3, 2, 1]


def _year(yy: int, individual: int) -> int:
    if individual < 500:
        return 1900 + yy
    if individual < 750 and yy >= 54:
        return 1800 + yy
    if individual >= 900 and yy >= 40:
        return 1900 + yy
    return 2000 + yy


def _decode(match: re.Match) -> Optional[dict]:
    individual = match.group("individual")
    year = _year(int(match.group("yy")), int(individual))
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if int(individual[2]) % 2 else Gender.FEMALE,
        "serial_number": individual,
        "checksum": match.group("checksum"),
    }


def _control_digit(digits: list[int], weights: list[int]) -> Optional[int]:
    check = weighted_modulus_digit(digits, weights, 11) % 11
    return None if check == 10 else check


def checksum(id_number: str) -> Optional[str]:
    """Compute the two control digits K1 and K2.

    Returns None on a format mismatch or when no control digit exists for
    the individual number.

    Examples:
        >>> checksum("01018012371")
        '71'
    """
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    digits = digits_of(id_number)
    k1 = _control_digit(digits[:9], FIRST_WEIGHTS[:9])
    if k1 is None:
        return None
    k2 = _control_digit(digits[:9] + [k1], SECOND_WEIGHTS[:10])
    if k2 is None:
        return None
    return f"{k1}{k2}"


def validate(id_number: str) -> bool:
    """Validate a fødselsnummer.

    Examples:
        >>> validate("01018012371")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match or _decode(match) is None:
        return False
    digits = digits_of(id_number)
    return (
        weighted_modulus_digit(digits[:10], FIRST_WEIGHTS, 11, True) == 0
        and weighted_modulus_digit(digits, SECOND_WEIGHTS, 11, True) == 0
    )


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number))
