"""
Mexico Clave Única de Registro de Población (CURP)

Format: AAAAYYMMDDGEECCCHC (18 characters)
- AAAA: letters from the name, YYMMDD: date of birth
- G: H (male), M (female) or X (non-binary)
- EE: state of birth, CCC: internal consonants
- H: homonym differentiator, a digit before 2000 and a letter after
- C: check digit, base-37 weighted sum
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import to_date


METADATA = IdMetadata(
    iso3166_alpha2="MX",
    min_length=18,
    max_length=18,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<name>[A-Z][AEIOUX][A-Z]{2})(?P<yy>\d{2})(?P<mm>0[1-9]|1[0-2])"
        r"(?P<dd>0[1-9]|[12]\d|3[01])(?P<gender>[HMX])(?P<state>[A-Z]{2})"
        r"(?P<consonants>[B-DF-HJ-NP-TV-Z]{3})(?P<homonym>[\dA-Z])(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("Clave Única de Registro de Población", "CURP"),
    links=("https://en.wikipedia.org/wiki/Unique_Population_Registry_Code",),
)

CHARACTERS = "0123456789ABCDEFGHIJKLMNÑOPQRSTUVWXYZ"

STATES = frozenset(
    [
        "AS", "BC", "BS", "CC", "CL", "CM", "CS", "CH", "DF", "DG", "GT", "GR", "HG",
        "JC", "MC", "MN", "MS", "NT", "NL", "OC", "PL", "QT", "QR", "SP", "SL", "SR",
        "TC", "TS", "TL", "VZ", "YN", "ZS", "NE",
    ]
)

GENDERS = {"H": Gender.MALE, "M": Gender.FEMALE, "X": Gender.NON_BINARY}


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    curp = id_number.upper()
    if not METADATA.regexp.fullmatch(curp):
        return None
    total = sum(CHARACTERS.index(char) * (18 - i) for i, char in enumerate(curp[:17]))
    return (10 - total % 10) % 10


def _decode(match: re.Match) -> Optional[dict]:
    if match.group("state") not in STATES:
        return None
    century = 1900 if match.group("homonym").isdigit() else 2000
    birth_date = to_date(century + int(match.group("yy")), int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    return {
        "birth_date": birth_date,
        "gender": GENDERS[match.group("gender")],
        "location": match.group("state"),
        "checksum": int(match.group("checksum")),
    }


def validate(id_number: str) -> bool:
    """Validate a CURP.

    Examples:
        >>> validate("HEGG560427MVZRRL04")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    curp = id_number.upper()
    match = METADATA.regexp.fullmatch(curp)
    if not match or _decode(match) is None:
        return False
    return checksum(curp) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number.upper()))
