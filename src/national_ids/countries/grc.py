"""
Greece identification numbers

Tax identity number (ΑΦΜ): nine digits, powers-of-two weighted modulus 11.

Identity card (Δελτίο Ταυτότητας, issued since 2000): two letters from the
Greek alphabet or their Latin look-alikes, an optional dash and six digits.
Cards carry no check digit.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of


_CARD_LETTERS = (
    "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩABEZHIKMNOPTYX"
    "αβγδεζηθικλμνξοπρστυφχψωabezhikmnoptyx"
)

TAX_REGEXP = re.compile(r"^\d{9}$", re.ASCII)
IDENTITY_CARD_REGEXP = re.compile(rf"^[{_CARD_LETTERS}]{{2}}-?\d{{6}}$", re.ASCII)

METADATA = IdMetadata(
    iso3166_alpha2="GR",
    min_length=8,
    max_length=9,
    parsable=False,
    checksum=True,
    regexp=re.compile(rf"^(?:\d{{9}}|[{_CARD_LETTERS}]{{2}}-?\d{{6}})$", re.ASCII),
    names=(
        "Αριθμός Φορολογικού Μητρώου",
        "AFM",
        "Tax Identity Number",
        "Identity Card Number",
        "Δελτίο Ταυτότητας",
    ),
    links=(
        "https://en.wikipedia.org/wiki/VAT_identification_number",
        "https://en.wikipedia.org/wiki/National_identification_number#Greece",
    ),
)


def checksum(id_number: str) -> Optional[int]:
    """Check digit of a tax identity number; None for identity cards."""
    if not isinstance(id_number, str) or not TAX_REGEXP.fullmatch(id_number):
        return None
    digits = digits_of(id_number[:8])
    return sum(d * 2 ** (8 - i) for i, d in enumerate(digits)) % 11 % 10


def validate(id_number: str) -> bool:
    """Validate a Greek tax identity number or identity card number.

    Examples:
        >>> validate("094259216")
        True
        >>> validate("ΑΒ-123456")
        True
    """
    if not isinstance(id_number, str) or not id_number:
        return False
    if IDENTITY_CARD_REGEXP.fullmatch(id_number):
        return True
    if not id_number.isascii():
        return False
    if not TAX_REGEXP.fullmatch(id_number) or id_number == "0" * 9:
        return False
    return checksum(id_number) == int(id_number[8])
