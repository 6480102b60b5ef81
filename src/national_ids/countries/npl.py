"""Nepal National ID Number: eleven digits, no check digit."""

import re

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="NP",
    min_length=11,
    max_length=11,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^\d{11}$", re.ASCII),
    names=("National ID Number", "NIN"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Nepal",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))
