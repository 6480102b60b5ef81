"""
San Marino identification numbers

- Social Security Number (ISS): nine digits
- Entity Tax Registration Number (COE): "SM" followed by five digits

Neither carries a check digit.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="SM",
    min_length=7,
    max_length=9,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?:(?P<ssn>\d{9})|SM(?P<coe>\d{5}))$", re.ASCII),
    names=("Social Security Number", "ISS", "Entity Tax Registration Number", "COE"),
    links=(
        "https://www.oecd.org/tax/automatic-exchange/crs-implementation-and-assistance/"
        "tax-identification-numbers/San-Marino-TIN.pdf",
    ),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number.upper()))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number.upper())
    if match.group("ssn"):
        return {"type": "social_security", "number": match.group("ssn")}
    return {"type": "tax_registration", "number": match.group("coe")}
