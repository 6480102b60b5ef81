"""
Indonesia National ID Number (Nomor Induk Kependudukan, NIK)

Format: PPKKCCDDMMYYSSSS
- PPKKCC: province, regency and district of registration
- DDMMYY: date of birth, women add 40 to the day
- SSSS: serial number, never 0000
The two-digit year resolves to the most recent year not in the future.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import resolve_two_digit_year, to_date
from national_ids.utils.text import normalize


METADATA = IdMetadata(
    iso3166_alpha2="ID",
    min_length=16,
    max_length=16,
    parsable=True,
    checksum=False,
    regexp=re.compile(
        r"^(?P<location>(?P<province>\d{2})\d{4})(?P<dd>[0-7]\d)(?P<mm>0[1-9]|1[0-2])"
        r"(?P<yy>\d{2})(?!0000)(?P<sn>\d{4})$",
        re.ASCII,
    ),
    names=("Nomor Induk Kependudukan", "NIK", "National ID Number"),
    links=("https://en.wikipedia.org/wiki/Indonesian_identity_card",),
)

PROVINCE_CODES = frozenset(
    [11, 12, 13, 14, 15, 16, 17, 18, 19, 21]
    + list(range(31, 37))
    + [51, 52, 53]
    + list(range(61, 66))
    + list(range(71, 77))
    + [81, 82]
    + list(range(91, 97))
)


def _decode(match: re.Match) -> Optional[dict]:
    if int(match.group("province")) not in PROVINCE_CODES:
        return None
    day = int(match.group("dd"))
    gender = Gender.MALE
    if day > 40:
        day -= 40
        gender = Gender.FEMALE
    year = resolve_two_digit_year(int(match.group("yy")))
    birth_date = to_date(year, int(match.group("mm")), day)
    if birth_date is None:
        return None
    return {
        "location": match.group("location"),
        "birth_date": birth_date,
        "gender": gender,
        "serial_number": match.group("sn"),
    }


def validate(id_number: str) -> bool:
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    match = METADATA.regexp.fullmatch(normalize(id_number))
    return bool(match) and _decode(match) is not None


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(normalize(id_number)))
