"""Israel Identity Number (Mispar Zehut): nine digits, the last a Luhn check digit."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import luhn_digit
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="IL",
    min_length=9,
    max_length=9,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^\d{9}$", re.ASCII),
    names=("Identity Number", "מספר זהות", "Mispar Zehut"),
    links=("https://en.wikipedia.org/wiki/Israeli_identity_card",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return luhn_digit(digits_of(id_number[:8]))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(id_number[-1])
