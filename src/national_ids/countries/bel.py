"""
Belgium National Registration Number (Rijksregisternummer)

Format: YY.MM.DD-SSS.CC
The check number is 97 - (YYMMDDSSS mod 97). People born in 2000 or later
have a 2 prefixed to the number before the modulus is computed, so the
century follows from which variant matches. Odd serial numbers are male.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date
from national_ids.utils.text import normalize


METADATA = IdMetadata(
    iso3166_alpha2="BE",
    min_length=11,
    max_length=15,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})(?P<sn>\d{3})(?P<checksum>\d{2})$",
        re.ASCII,
    ),
    names=("Rijksregisternummer", "Numéro de registre national", "National Registration Number"),
    links=("https://nl.wikipedia.org/wiki/Rijksregisternummer",),
)


def _century(number: str) -> Optional[int]:
    check = int(number[9:])
    if 97 - int(number[:9]) % 97 == check:
        return 1900
    if 97 - int("2" + number[:9]) % 97 == check:
        return 2000
    return None


def _decode(number: str) -> Optional[dict]:
    match = METADATA.regexp.fullmatch(number)
    if not match:
        return None
    century = _century(number)
    if century is None:
        return None
    birth_date = to_date(century + int(match.group("yy")), int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": Gender.MALE if int(match.group("sn")) % 2 else Gender.FEMALE,
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }


def checksum(id_number: str) -> Optional[int]:
    """Return the check number, or None when neither century matches."""
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    century = _century(number)
    if century is None:
        return None
    prefix = "2" if century == 2000 else ""
    return 97 - int(prefix + number[:9]) % 97


def validate(id_number: str) -> bool:
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    return _decode(normalize(id_number)) is not None


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(normalize(id_number))
