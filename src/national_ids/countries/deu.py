"""
Germany Tax Identification Number (Steuerliche Identifikationsnummer)

Eleven digits, the first never 0. Among the first ten digits exactly one
digit value occurs two or three times, and no digit occurs three times in a
row. The last digit is an ISO 7064 MOD 11,10 check digit.
"""

import re
from collections import Counter
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.checksums import mn_modulus_digit, modulus_overflow_mod10
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="DE",
    min_length=11,
    max_length=11,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^[1-9]\d{10}$", re.ASCII),
    names=("Steuerliche Identifikationsnummer", "Steuer-IdNr.", "Tax Identification Number"),
    links=("https://de.wikipedia.org/wiki/Steuerliche_Identifikationsnummer",),
)


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return None
    return modulus_overflow_mod10(mn_modulus_digit(digits_of(number[:10]), 10, 11))


def _has_valid_digit_distribution(body: str) -> bool:
    repeated = [count for count in Counter(body).values() if count > 1]
    if len(repeated) != 1 or repeated[0] > 3:
        return False
    return not any(body[i] == body[i + 1] == body[i + 2] for i in range(len(body) - 2))


def validate(id_number: str) -> bool:
    """Validate a German tax identification number.

    Examples:
        >>> validate("36574261809")
        True
        >>> validate("36574261808")
        False
    """
    if (
        not isinstance(id_number, str)
        or not id_number
        or not id_number.isascii()
        or id_number != id_number.strip()
    ):
        return False
    number = normalize(id_number)
    if not METADATA.regexp.fullmatch(number):
        return False
    if not _has_valid_digit_distribution(number[:10]):
        return False
    return checksum(number) == int(number[10])
