"""Pakistan Computerised National Identity Card number: #####-#######-#, last digit odd for men."""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="PK",
    min_length=13,
    max_length=15,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?P<location>\d{5})-?(?P<sn>\d{7})-?(?P<gender>\d)$", re.ASCII),
    names=("Computerised National Identity Card", "CNIC", "National Identity Card"),
    links=("https://en.wikipedia.org/wiki/CNIC_(Pakistan)",),
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
        "location": match.group("location"),
        "serial_number": match.group("sn"),
        "gender": Gender.MALE if int(match.group("gender")) % 2 else Gender.FEMALE,
    }
