"""Spain identity document (DNI) and foreigner identity number (NIE)."""

import re
from typing import Optional

from national_ids.models import Citizenship, IdMetadata
from national_ids.utils.text import normalize


METADATA = IdMetadata(
    iso3166_alpha2="ES",
    min_length=9,
    max_length=9,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?P<number>\d{8}|[XYZ]\d{7})(?P<checksum>[A-Z])$", re.ASCII),
    names=("Documento Nacional de Identidad", "DNI", "Número de Identidad de Extranjero", "NIE"),
    links=("https://en.wikipedia.org/wiki/Documento_Nacional_de_Identidad_(Spain)",),
)

CHECK_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"

# NIE prefix letters stand for a leading digit
NIE_PREFIXES = {"X": "0", "Y": "1", "Z": "2"}


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(normalize(id_number).upper())
    if not match:
        return None
    number = match.group("number")
    number = NIE_PREFIXES.get(number[0], number[0]) + number[1:]
    return CHECK_LETTERS[int(number) % 23]


def validate(id_number: str) -> bool:
    """Validate a DNI or NIE.

    Examples:
        >>> validate("12345678Z")
        True
        >>> validate("X1234567L")
        True
    """
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    match = METADATA.regexp.fullmatch(normalize(id_number).upper())
    if not match:
        return False
    return checksum(id_number) == match.group("checksum")


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(normalize(id_number).upper())
    is_nie = match.group("number")[0] in NIE_PREFIXES
    return {
        "type": "NIE" if is_nie else "DNI",
        "citizenship": Citizenship.FOREIGN if is_nie else Citizenship.CITIZEN,
        "checksum": match.group("checksum"),
    }
