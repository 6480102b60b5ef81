"""United Kingdom National Insurance Number."""

import re

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="GB",
    min_length=9,
    max_length=13,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^(?P<prefix>[A-Z]{2}) ?\d{2} ?\d{2} ?\d{2} ?(?P<suffix>[A-Z])$", re.ASCII),
    names=("National Insurance Number", "NINO"),
    links=("https://en.wikipedia.org/wiki/National_Insurance_number",),
)

# Letters never used in the first and second position of the prefix
INVALID_FIRST_LETTERS = frozenset("DFIQUV")
INVALID_SECOND_LETTERS = frozenset("DFIQUVO")

# Prefixes that are never allocated
INVALID_PREFIXES = frozenset({"BG", "GB", "NK", "KN", "TN", "NT", "ZZ"})

VALID_SUFFIXES = frozenset("ABCDFMP")


def validate(id_number: str) -> bool:
    """Validate a National Insurance Number.

    Examples:
        >>> validate("AB123456C")
        True
        >>> validate("GB123456C")
        False
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return False
    prefix = match.group("prefix")
    if prefix[0] in INVALID_FIRST_LETTERS or prefix[1] in INVALID_SECOND_LETTERS:
        return False
    if prefix in INVALID_PREFIXES:
        return False
    return match.group("suffix") in VALID_SUFFIXES
