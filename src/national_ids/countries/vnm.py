"""
Vietnam Citizen Identity Card Number

Twelve-digit format: PPPGYYSSSSSS
- PPP: province of birth
- G: century and gender, even for men (0/1: 1900s, 2/3: 2000s, ...)
- YY: year of birth, SSSSSS: random serial
Legacy nine-digit identity card numbers are accepted on format alone.
Neither format has a check digit.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="VN",
    min_length=9,
    max_length=12,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?:(?P<province>\d{3})(?P<g>\d)(?P<yy>\d{2})(?P<sn>\d{6})|(?P<legacy>\d{9}))$", re.ASCII),
    names=("Căn cước công dân", "Citizen Identity Card", "Chứng minh nhân dân"),
    links=("https://en.wikipedia.org/wiki/Vietnamese_identity_card",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    if match.group("legacy"):
        return {
            "province_code": None,
            "birth_year": None,
            "gender": None,
            "serial_number": match.group("legacy"),
        }
    g = int(match.group("g"))
    return {
        "province_code": match.group("province"),
        "birth_year": 1900 + 100 * (g // 2) + int(match.group("yy")),
        "gender": Gender.MALE if g % 2 == 0 else Gender.FEMALE,
        "serial_number": match.group("sn"),
    }
