"""
Italy Fiscal Code (Codice fiscale)

Format: SSSNNNYYMDDZZZZC
- SSS, NNN: consonants of surname and name
- YY: year of birth, M: month letter, DD: day of birth (plus 40 for women)
- ZZZZ: cadastral code of the place of birth
- C: check letter from the odd/even character tables

Digits can be replaced by letters (omocodia) when two people would
otherwise share a code.
"""

import re
from typing import Optional

from national_ids.models import Gender, IdMetadata
from national_ids.utils.dates import resolve_two_digit_year, to_date


_DIGIT = r"[\dLMNPQRSTUV]"

METADATA = IdMetadata(
    iso3166_alpha2="IT",
    min_length=16,
    max_length=16,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        rf"^(?P<surname>[A-Z]{{3}})(?P<name>[A-Z]{{3}})(?P<yy>{_DIGIT}{{2}})"
        rf"(?P<mm>[ABCDEHLMPRST])(?P<dd>{_DIGIT}{{2}})"
        rf"(?P<area>[A-Z]{_DIGIT}{{3}})(?P<checksum>[A-Z])$",
        re.ASCII,
    ),
    names=("Codice fiscale", "Fiscal Code", "Tax Code"),
    links=("https://en.wikipedia.org/wiki/Italian_fiscal_code",),
)

MONTH_CODES = "ABCDEHLMPRST"
OMOCODIA_LETTERS = "LMNPQRSTUV"

ODD_VALUES = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15, "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15, "H": 17, "I": 19, "J": 21,
    "K": 2, "L": 4, "M": 18, "N": 20, "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14,
    "U": 16, "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}


def _even_value(char: str) -> int:
    return int(char) if char.isdigit() else ord(char) - 65


def _to_digits(value: str) -> str:
    return "".join(
        str(OMOCODIA_LETTERS.index(char)) if char in OMOCODIA_LETTERS else char
        for char in value
    )


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    code = id_number.upper()
    if not METADATA.regexp.fullmatch(code):
        return None
    total = sum(
        ODD_VALUES[char] if index % 2 == 0 else _even_value(char)
        for index, char in enumerate(code[:15])
    )
    return chr(65 + total % 26)


def _decode(match: re.Match) -> Optional[dict]:
    day = int(_to_digits(match.group("dd")))
    gender = Gender.MALE
    if day > 40:
        day -= 40
        gender = Gender.FEMALE
    year = resolve_two_digit_year(int(_to_digits(match.group("yy"))))
    birth_date = to_date(year, MONTH_CODES.index(match.group("mm")) + 1, day)
    if birth_date is None:
        return None
    area = match.group("area")
    return {
        "surname": match.group("surname"),
        "name": match.group("name"),
        "birth_date": birth_date,
        "gender": gender,
        "area_code": area[0] + _to_digits(area[1:]),
        "checksum": match.group("checksum"),
    }


def validate(id_number: str) -> bool:
    """Validate an Italian fiscal code (case-insensitive).

    Examples:
        >>> validate("RSSMRA85T10A562S")
        True
        >>> validate("RSSMRA85M01H501Z")
        False
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    code = id_number.upper()
    match = METADATA.regexp.fullmatch(code)
    if not match or _decode(match) is None:
        return False
    return checksum(code) == match.group("checksum")


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    return _decode(METADATA.regexp.fullmatch(id_number.upper()))
