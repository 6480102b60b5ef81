"""Slovenia Unique Master Citizen Number (EMŠO)

All Slovenian numbers carry region code 50; the older Yugoslav region
codes that remain valid are treated as residents.
"""

from typing import Optional

from national_ids.countries import yugoslavia
from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="SI",
    min_length=13,
    max_length=13,
    parsable=True,
    checksum=True,
    regexp=yugoslavia.JMBG_REGEXP,
    names=("Enotna matična številka občana",) + yugoslavia.JMBG_NAMES,
    links=yugoslavia.JMBG_LINKS,
)

classify_location = yugoslavia.citizens_in(50, 50)


def checksum(id_number: str) -> Optional[int]:
    return yugoslavia.checksum(id_number)


def validate(id_number: str) -> bool:
    """Validate a JMBG issued in this country.

    Examples:
        >>> validate("0101006500006")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return parse(id_number) is not None


def parse(id_number: str) -> Optional[dict]:
    return yugoslavia.parse_jmbg(id_number, classify_location)
