"""Colombia unique personal identification number (NUIP) with DIAN verification digit."""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of


METADATA = IdMetadata(
    iso3166_alpha2="CO",
    min_length=7,
    max_length=15,
    parsable=False,
    checksum=True,
    regexp=re.compile(r"^(?P<number>\d{1,3}(?:\.?\d{3}){1,3})-?(?P<checksum>\d)$", re.ASCII),
    names=("Número Único de Identificación Personal", "NUIP", "Cédula de Ciudadanía"),
    links=("https://es.wikipedia.org/wiki/N%C3%BAmero_de_Identificaci%C3%B3n_Tributaria",),
)

# Weights applied from the rightmost digit
WEIGHTS = [3, 7, 13, 17, 19, 23, 29, 37, 41, 43, 47, 53, 59, 67, 71]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return None
    digits = digits_of(match.group("number").replace(".", ""))
    modulus = sum(d * w for d, w in zip(reversed(digits), WEIGHTS)) % 11
    return modulus if modulus < 2 else 11 - modulus


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return False
    return checksum(id_number) == int(match.group("checksum"))
