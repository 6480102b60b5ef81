"""United Arab Emirates Emirates ID: 784-YYYY-NNNNNNN-C with a Luhn check digit."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import luhn_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="AE",
    min_length=15,
    max_length=18,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^784-?(?P<yyyy>\d{4})-?(?P<sn>\d{7})-?(?P<checksum>\d)$", re.ASCII),
    names=("Emirates ID", "Emirates Identity Card Number"),
    links=("https://en.wikipedia.org/wiki/Emirates_Identity_Card",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return luhn_digit(digits_of(normalize(id_number)[:14]))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "birth_year": int(match.group("yyyy")),
        "serial_number": match.group("sn"),
        "checksum": int(match.group("checksum")),
    }
