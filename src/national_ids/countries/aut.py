"""
Austria identification numbers

Two identifiers are accepted:
- Tax number (Steuernummer), nine digits written XX-XXX/XXXX. The last digit
  is a Luhn-style check digit over the first eight.
- Social insurance number (Sozialversicherungsnummer), ten digits SSSCDDMMYY
  with a weighted modulus 11 check digit in the fourth position.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.dates import resolve_two_digit_year, to_date
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="AT",
    min_length=9,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?:\d{2}-?\d{3}/?\d{4}|[1-9]\d{3} ?\d{6})$", re.ASCII),
    names=("Steuernummer", "Tax Identification Number", "Sozialversicherungsnummer"),
    links=(
        "https://de.wikipedia.org/wiki/Steuernummer",
        "https://de.wikipedia.org/wiki/Sozialversicherungsnummer#%C3%96sterreich",
    ),
)

TAX_NUMBER_REGEXP = re.compile(r"^(?P<office>\d{2})-?(?P<number>\d{3}/?\d{3})(?P<checksum>\d)$", re.ASCII)
SOCIAL_INSURANCE_REGEXP = re.compile(
    r"^(?P<sn>[1-9]\d{2})(?P<checksum>\d) ?(?P<dd>\d{2})(?P<mm>\d{2})(?P<yy>\d{2})$",
    re.ASCII,
)

# The weight of the check digit position is 0
SOCIAL_INSURANCE_WEIGHTS = [3, 7, 9, 0, 5, 8, 4, 2, 1, 6]


def _tax_number_checksum(digits: list[int]) -> int:
    total = 0
    for index, digit in enumerate(digits[:8]):
        if index % 2:
            doubled = digit * 2
            total += doubled // 10 + doubled % 10
        else:
            total += digit
    return (100 - total) % 10


def _social_insurance_checksum(digits: list[int]) -> Optional[int]:
    modulus = sum(d * w for d, w in zip(digits, SOCIAL_INSURANCE_WEIGHTS)) % 11
    return None if modulus == 10 else modulus


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    if TAX_NUMBER_REGEXP.fullmatch(id_number):
        return _tax_number_checksum(digits_of(normalize(id_number)))
    if SOCIAL_INSURANCE_REGEXP.fullmatch(id_number):
        return _social_insurance_checksum(digits_of(normalize(id_number)))
    return None


def validate(id_number: str) -> bool:
    """Validate an Austrian tax number or social insurance number.

    Examples:
        >>> validate("12-345/6782")
        True
        >>> validate("1237010180")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = TAX_NUMBER_REGEXP.fullmatch(id_number) or SOCIAL_INSURANCE_REGEXP.fullmatch(id_number)
    if not match:
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = TAX_NUMBER_REGEXP.fullmatch(id_number)
    if match:
        return {
            "type": "tax_number",
            "tax_office": match.group("office"),
            "checksum": int(match.group("checksum")),
        }
    match = SOCIAL_INSURANCE_REGEXP.fullmatch(id_number)
    year = resolve_two_digit_year(int(match.group("yy")))
    return {
        "type": "social_insurance_number",
        "serial_number": match.group("sn"),
        # Dates of birth are not always real calendar days
        "birth_date": to_date(year, int(match.group("mm")), int(match.group("dd"))),
        "checksum": int(match.group("checksum")),
    }
