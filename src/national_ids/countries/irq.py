"""Iraq National Card Number: twelve digits, no check digit."""

import re

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="IQ",
    min_length=12,
    max_length=12,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^\d{12}$", re.ASCII),
    names=("National Card Number", "البطاقة الوطنية"),
    links=("https://en.wikipedia.org/wiki/Iraqi_National_Card",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))
