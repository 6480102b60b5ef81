"""Switzerland social security number (AHV/AVS), 756.XXXX.XXXX.XC with EAN-13 check digit."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import ean13_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="CH",
    min_length=13,
    max_length=16,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^756\.?\d{4}\.?\d{4}\.?\d{2}$", re.ASCII),
    names=("AHV-Nummer", "Numéro AVS", "Social Security Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Switzerland",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return ean13_digit(digits_of(normalize(id_number)[:12]))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(normalize(id_number)[12])
