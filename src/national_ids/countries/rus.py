"""Russia internal passport number: four-digit series and six-digit number."""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="RU",
    min_length=10,
    max_length=11,
    parsable=True,
    checksum=False,
    regexp=re.compile(r"^(?P<series>\d{4})\s?(?P<number>\d{6})$", re.ASCII),
    names=("Internal Passport", "Passport Number", "Паспорт гражданина РФ"),
    links=("https://en.wikipedia.org/wiki/Russian_internal_passport",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return False
    return match.group("series") != "0000" and match.group("number") != "000000"


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {"series": match.group("series"), "number": match.group("number")}
