"""Georgia Personal Number: eleven digits (nine-digit legacy numbers accepted), format only."""

import re

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="GE",
    min_length=9,
    max_length=11,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^(?:\d{9}|\d{11})$", re.ASCII),
    names=("პირადი ნომერი", "Personal Number"),
    links=("https://en.wikipedia.org/wiki/Georgian_identity_card",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))
