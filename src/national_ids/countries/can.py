"""
Canada Social Insurance Number

Nine digits with a Luhn check digit. The first digit identifies the region
of registration; 9 is issued to temporary residents and 0 and 8 are unused.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import luhn_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="CA",
    min_length=9,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^[1-79]\d{2}[ -]?\d{3}[ -]?\d{3}$", re.ASCII),
    names=("Social Insurance Number", "SIN", "Numéro d'assurance sociale"),
    links=("https://en.wikipedia.org/wiki/Social_Insurance_Number",),
)

REGIONS = {
    "1": "Nova Scotia, New Brunswick, Prince Edward Island, Newfoundland and Labrador",
    "2": "Quebec",
    "3": "Quebec",
    "4": "Ontario",
    "5": "Ontario",
    "6": "Ontario, Manitoba, Saskatchewan, Alberta, Northwest Territories, Nunavut",
    "7": "British Columbia, Yukon",
    "9": "Temporary resident",
}


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    return luhn_digit(digits_of(normalize(id_number)[:8]))


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    return checksum(id_number) == int(normalize(id_number)[8])


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    number = normalize(id_number)
    return {
        "region": REGIONS[number[0]],
        "temporary_resident": number[0] == "9",
        "checksum": int(number[8]),
    }
