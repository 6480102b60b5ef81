"""Slovakia Birth Number (Rodné číslo), shared with the Czech Republic."""

import re
from typing import Optional

from national_ids.countries.cze import checksum as _birth_number_checksum
from national_ids.countries.cze import decode_birth_number
from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="SK",
    min_length=9,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})/?(?P<sn>\d{3})(?P<checksum>\d)?$", re.ASCII),
    names=("Rodné číslo", "Birth Number"),
    links=("https://sk.wikipedia.org/wiki/Rodn%C3%A9_%C4%8D%C3%ADslo",),
)


def checksum(id_number: str) -> Optional[int]:
    return _birth_number_checksum(id_number)


def validate(id_number: str) -> bool:
    return decode_birth_number(id_number) is not None


def parse(id_number: str) -> Optional[dict]:
    return decode_birth_number(id_number)
