"""
New Zealand identification numbers

IRD number: eight or nine digits (XX-XXX-XXX or XXX-XXX-XXX) between
10,000,000 and 150,000,000. The check digit is 11 - (weighted sum mod 11)
with weights 3,2,7,6,5,4,3,2; a result of 10 is recomputed with weights
7,4,3,2,5,2,7,6 and a second 10 makes the number invalid.

Driver licence numbers (two letters and six digits) are accepted as well.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="NZ",
    min_length=8,
    max_length=11,
    parsable=True,
    checksum=True,
    regexp=re.compile(r"^(?:\d{2,3}-?\d{3}-?\d{3}|[A-Z]{2}\d{6})$", re.ASCII),
    names=("IRD Number", "Inland Revenue Department Number", "Driver Licence Number"),
    links=(
        "https://www.ird.govt.nz/",
        "https://en.wikipedia.org/wiki/Driving_licence_in_New_Zealand",
    ),
)

IRD_REGEXP = re.compile(r"^\d{2,3}-?\d{3}-?\d{3}$", re.ASCII)
DRIVER_LICENCE_REGEXP = re.compile(r"^(?P<prefix>[A-Z]{2})(?P<number>\d{6})$", re.ASCII)

PRIMARY_WEIGHTS = [3, 2, 7, 6, 5, 4, 3, 2]
SECONDARY_WEIGHTS = [7, 4, 3, 2, 5, 2, 7, 6]


def _ird_check(base: list[int], weights: list[int]) -> int:
    remainder = sum(d * w for d, w in zip(base, weights)) % 11
    return 0 if remainder == 0 else 11 - remainder


def checksum(id_number: str) -> Optional[int]:
    """Compute the check digit of an IRD number."""
    if not isinstance(id_number, str) or not IRD_REGEXP.fullmatch(id_number):
        return None
    base = digits_of(normalize(id_number).zfill(9)[:8])
    check = _ird_check(base, PRIMARY_WEIGHTS)
    if check == 10:
        check = _ird_check(base, SECONDARY_WEIGHTS)
    return None if check == 10 else check


def _is_valid_driver_licence(id_number: str) -> bool:
    match = DRIVER_LICENCE_REGEXP.fullmatch(id_number.upper())
    return bool(match) and len(set(match.group("number"))) > 1


def validate(id_number: str) -> bool:
    """Validate an IRD number or driver licence number.

    Examples:
        >>> validate("49-091-850")
        True
        >>> validate("DL123456")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if IRD_REGEXP.fullmatch(id_number):
        number = normalize(id_number)
        if not 10_000_000 < int(number) < 150_000_000:
            return False
        return checksum(id_number) == int(number[-1])
    return _is_valid_driver_licence(id_number)


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    if IRD_REGEXP.fullmatch(id_number):
        return {"type": "ird_number", "checksum": int(normalize(id_number)[-1])}
    return {"type": "driver_licence", "prefix": id_number[:2].upper()}
