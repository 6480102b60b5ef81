"""
Macau Resident Identity Card Number

Format: TNNNNNN(C)
- T: document type (0, 1, 5, 7 or 8)
- C: trailing digit, written in parentheses on the card
"""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="MO",
    min_length=8,
    max_length=10,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?P<doc_type>[01578])(?P<sn>\d{6})\(?(?P<extra>\d)\)?$", re.ASCII),
    names=(
        "Resident Identity Card",
        "Permanent Resident Identity Card",
        "BIRP",
        "Non-Permanent Resident Identity Card",
        "BIRNP",
    ),
    links=("https://en.wikipedia.org/wiki/Macau_Resident_Identity_Card",),
)

DOCUMENT_TYPES = {
    "0": "commercial individual",
    "1": "first generation",
    "5": "macau civil authority",
    "7": "macau public security police",
    "8": "entity",
}


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "document_type": DOCUMENT_TYPES[match.group("doc_type")],
        "serial_number": match.group("sn") + match.group("extra"),
    }
