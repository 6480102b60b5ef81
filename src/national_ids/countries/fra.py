"""
France Social Security Number (Numéro d'inscription au répertoire, NIR)

Format: SYYMMDDCCCKKKCC (15 characters)
- S: 1 or 7 male, 2 or 8 female (7 and 8 are temporary numbers)
- YY, MM: year and month of birth; months above 12 mean unknown
- DD: department of birth (2A/2B for Corsica, 97x/98x overseas, 99 abroad)
- CCC: commune or country code
- KKK: birth certificate number
- CC: control key, 97 - (number mod 97)
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import resolve_two_digit_year
from national_ids.utils.text import normalize


METADATA = IdMetadata(
    iso3166_alpha2="FR",
    min_length=15,
    max_length=15,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<gender>[1278])(?P<yy>\d{2})(?P<mm>\d{2})(?P<department>\d{2}|2[AB])"
        r"(?P<city>\d{3})(?P<certificate>\d{3})(?P<key>\d{2})$",
        re.ASCII,
    ),
    names=("Numéro d'inscription au répertoire", "NIR", "Numéro de sécurité sociale"),
    links=("https://en.wikipedia.org/wiki/INSEE_code",),
)

# Corsican departments are replaced by numbers before computing the key
CORSICA_SUBSTITUTES = {"2A": "19", "2B": "18"}


def _clean(id_number: str) -> str:
    return normalize(id_number).upper()


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(_clean(id_number))
    if not match:
        return None
    department = match.group("department")
    number = (
        match.group("gender")
        + match.group("yy")
        + match.group("mm")
        + CORSICA_SUBSTITUTES.get(department, department)
        + match.group("city")
        + match.group("certificate")
    )
    return 97 - int(number) % 97


def validate(id_number: str) -> bool:
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    match = METADATA.regexp.fullmatch(_clean(id_number))
    if not match or match.group("mm") == "00":
        return False
    return checksum(id_number) == int(match.group("key"))


def parse(id_number: str) -> Optional[dict]:
    """Decode gender, year and place of birth.

    Overseas departments (97, 98) use three digits, leaving two for the
    commune.

    Examples:
        >>> info = parse("2 55 08 14 168 025 38")
        >>> info["birth_year"], info["department"]
        (1955, '14')
    """
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(_clean(id_number))
    department = match.group("department")
    city = match.group("city")
    if department in ("97", "98"):
        department, city = department + city[0], city[1:]
    month = int(match.group("mm"))
    return {
        "gender": Gender.MALE if match.group("gender") in ("1", "7") else Gender.FEMALE,
        "birth_year": resolve_two_digit_year(int(match.group("yy"))),
        "birth_month": month if month <= 12 else None,
        "department": department,
        "city": city,
        "certificate": match.group("certificate"),
        "checksum": int(match.group("key")),
    }
