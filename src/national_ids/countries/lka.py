"""
Sri Lanka National Identity Card Number

Old format: YYDDDSSSCV (nine digits and V or X)
New format: YYYYDDDSSSSC (twelve digits)
DDD is the day of the year, plus 500 for women. Day numbers always count
29 days for February, so day 60 only exists in leap years. The check digit
algorithm is not published and is not verified.
"""

import re
from datetime import date
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date


METADATA = IdMetadata(
    iso3166_alpha2="LK",
    min_length=10,
    max_length=12,
    parsable=True,
    checksum=False,
    regexp=re.compile(
        r"^(?:(?P<yy>\d{2})(?P<old_days>\d{3})(?P<old_sn>\d{3})(?P<old_checksum>\d)(?P<voter>[VX])"
        r"|(?P<yyyy>(?:19|20)\d{2})(?P<days>\d{3})(?P<sn>\d{4})(?P<checksum>\d))$",
        re.ASCII,
    ),
    names=("National Identity Card", "NIC", "ජාතික හැඳුනුම්පත"),
    links=("https://en.wikipedia.org/wiki/National_identity_card_(Sri_Lanka)",),
)


def _day_of_year_to_date(year: int, day_number: int) -> Optional[date]:
    if not 1 <= day_number <= 366:
        return None
    # Resolve month and day against a leap-year calendar
    reference = date.fromordinal(date(2000, 1, 1).toordinal() + day_number - 1)
    return to_date(year, reference.month, reference.day)


def _decode(match: re.Match) -> Optional[dict]:
    if match.group("yyyy"):
        year = int(match.group("yyyy"))
        days, sn, check = match.group("days"), match.group("sn"), match.group("checksum")
    else:
        year = 1900 + int(match.group("yy"))
        days, sn, check = match.group("old_days"), match.group("old_sn"), match.group("old_checksum")
    day_number = int(days)
    gender = Gender.MALE
    if day_number > 500:
        day_number -= 500
        gender = Gender.FEMALE
    birth_date = _day_of_year_to_date(year, day_number)
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": gender,
        "serial_number": sn,
        "checksum": int(check),
        "voter": match.group("voter") == "V" if match.group("voter") else None,
    }


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    return bool(match) and _decode(match) is not None


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number.upper()))
