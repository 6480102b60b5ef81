"""
Zimbabwe National ID Number

Format: RR-NNNNNN(N)-C-DD
- RR: registration office (district) code
- NNNNNN(N): national number
- C: check letter, RR+NNNNNN(N) as an integer mod 23
- DD: district of origin, or 00
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import normalize


METADATA = IdMetadata(
    iso3166_alpha2="ZW",
    min_length=11,
    max_length=16,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<register_office>\d{2})[\s-]?(?P<national_number>\d{6,7})[\s-]?"
        r"(?P<checksum>[A-Z])[\s-]?(?P<district>\d{2})$",
        re.ASCII,
    ),
    names=("National ID Number", "National Registration Number"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Zimbabwe",),
)

DISTRICT_CODES = frozenset((
    "02", "03", "04", "05", "06", "07", "08", "10", "11", "12", "13", "14", "15", "18",
    "19", "21", "22", "23", "24", "25", "26", "27", "28", "29", "32", "34", "35", "37",
    "38", "39", "41", "42", "43", "44", "45", "46", "47", "48", "49", "50", "53", "54",
    "56", "58", "59", "61", "63", "66", "67", "68", "70", "71", "73", "75", "77", "79",
    "80", "83", "84", "85", "86",
))

# I, O and U are not used as check letters
CHECK_LETTERS = "ZABCDEFGHJKLMNPQRSTVWXY"


def _clean(id_number: str) -> str:
    return normalize(id_number).upper()


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(_clean(id_number))
    if not match:
        return None
    value = int(match.group("register_office") + match.group("national_number"))
    return CHECK_LETTERS[value % 23]


def validate(id_number: str) -> bool:
    """Validate a Zimbabwean national ID.

    Examples:
        >>> validate("63-123456-B-63")
        True
    """
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    match = METADATA.regexp.fullmatch(_clean(id_number))
    if not match:
        return False
    if match.group("register_office") not in DISTRICT_CODES:
        return False
    district = match.group("district")
    if district not in DISTRICT_CODES and district != "00":
        return False
    return checksum(id_number) == match.group("checksum")


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(_clean(id_number))
    return {
        "register_office_code": match.group("register_office"),
        "national_number": match.group("national_number"),
        "district_code": match.group("district"),
        "checksum": match.group("checksum"),
    }
