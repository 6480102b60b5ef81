"""North Macedonia Unique Master Citizen Number (EMBG)

Citizens are registered in regions 41-49; other region codes are
issued to residents.
"""

from typing import Optional

from national_ids.countries import yugoslavia
from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="MK",
    min_length=13,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=yugoslavia.JMBG_REGEXP,
    names=("ЕМБГ",) + yugoslavia.JMBG_NAMES,
    links=yugoslavia.JMBG_LINKS,
)

classify_location = yugoslavia.citizens_in(41, 49)


def checksum(id_number: str) -> Optional[int]:
    return yugoslavia.checksum(id_number)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return parse(id_number) is not None


def parse(id_number: str) -> Optional[dict]:
    return yugoslavia.parse_jmbg(id_number, classify_location)
