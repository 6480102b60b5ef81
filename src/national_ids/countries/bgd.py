"""
Bangladesh National ID

Old format, 13 digits: DDRPPUUSSSSSS
- DD: district, R: RMO code (1-5 or 9), PP: police station, UU: union,
  SSSSSS: serial number
New format, 17 digits: the birth year followed by the old format.
No checksum is published.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="BD",
    min_length=13,
    max_length=17,
    parsable=True,
    checksum=False,
    regexp=re.compile(
        r"^(?P<yyyy>(?:19|20)\d{2})?(?P<district>\d{2})(?P<rmo>[1-59])"
        r"(?P<police_station>\d{2})(?P<union>\d{2})(?P<sn>\d{6})$",
        re.ASCII,
    ),
    names=("National ID", "জাতীয় পরিচয়পত্র", "NID"),
    links=("https://en.wikipedia.org/wiki/National_identity_card_(Bangladesh)",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    return {
        "birth_year": int(match.group("yyyy")) if match.group("yyyy") else None,
        "district": match.group("district"),
        "rmo": match.group("rmo"),
        "police_station": match.group("police_station"),
        "union": match.group("union"),
        "serial_number": match.group("sn"),
    }
