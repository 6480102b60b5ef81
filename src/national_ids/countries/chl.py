"""Chile national role number (RUN/RUT) with modulus 11 check character."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="CL",
    min_length=8,
    max_length=12,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^(?P<number>\d{1,2}\.?\d{3}\.?\d{3})-?(?P<checksum>[\dK])$", re.ASCII),
    names=("Rol Único Nacional", "RUN", "Rol Único Tributario", "RUT"),
    links=("https://en.wikipedia.org/wiki/National_identification_number#Chile",),
)


def checksum(id_number: str) -> Optional[str]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return None
    digits = digits_of(match.group("number").replace(".", ""))
    total = sum(d * (2 + i % 6) for i, d in enumerate(reversed(digits)))
    check = 11 - total % 11
    if check == 11:
        return "0"
    if check == 10:
        return "K"
    return str(check)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number.upper())
    if not match:
        return False
    return checksum(id_number) == match.group("checksum")
