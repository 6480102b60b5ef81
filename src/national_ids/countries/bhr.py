"""Bahrain Personal Number (CPR): YYMMSSSSC, year and month of birth then serial."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.dates import resolve_two_digit_year


METADATA = IdMetadata(
    iso3166_alpha2="BH",
    min_length=9,
    max_length=9,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?P<yy>\d{2})(?P<mm>0[1-9]|1[0-2])(?P<sn>\d{4})(?P<checksum>\d)$", re.ASCII),
    names=("Central Population Registration Number", "CPR", "Personal Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Bahrain",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "birth_year": resolve_two_digit_year(int(match.group("yy"))),
        "birth_month": int(match.group("mm")),
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }
