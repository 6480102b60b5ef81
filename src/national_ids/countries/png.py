"""Papua New Guinea National ID Number: ten digits, no check digit."""

import re

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="PG",
    min_length=10,
    max_length=10,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^\d{10}$", re.ASCII),
    names=("National ID Number", "NID"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Papua_New_Guinea",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))
