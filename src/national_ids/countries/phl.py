"""Philippine Identification System Number (PhilSys): twelve random digits, no check digit."""

import re

from national_ids.models import IdMetadata
from national_ids.utils.text import normalize


METADATA = IdMetadata(
    iso3166_alpha2="PH",
    min_length=12,
    max_length=14,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^\d{4}[\s-]?\d{7}[\s-]?\d$", re.ASCII),
    names=("PhilSys Number", "PSN", "Philippine National ID"),
    links=(
        "https://en.wikipedia.org/wiki/National_identification_number#Philippines",
        "https://psa.gov.ph/philsys",
    ),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if not METADATA.regexp.fullmatch(id_number):
        return False
    # A single repeated digit is never issued
    return len(set(normalize(id_number))) > 1
