"""
Thailand National Identity Card Number

Format: C-PPDD-SSSSS-SS-K
- C: citizenship type (0-8)
- PP: province of registration, DD: district within the province
- K: check digit, (11 - weighted sum mod 11) mod 10 with weights 13..2
"""

import re
from typing import Optional

from national_ids.models import Citizenship, IdMetadata
from national_ids.utils.checksums import modulus_overflow_mod10, weighted_modulus_digit
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="TH",
    min_length=13,
    max_length=17,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?P<citizenship>[0-8])[\s-]?(?P<province>\d{2})(?P<district>\d{2})[\s-]?"
        r"(?P<sn>\d{5}[\s-]?\d{2})[\s-]?(?P<checksum>\d)$",
        re.ASCII,
    ),
    names=("บัตรประจำตัวประชาชน", "National ID Number", "Population Identification Code"),
    links=("https://en.wikipedia.org/wiki/Thai_identity_card",),
)

WEIGHTS = [13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2]

# Highest district code in use for each province
DISTRICT_MAX_VALUE = {
    "10": 50, "11": 6, "12": 6, "13": 7, "14": 46, "15": 7, "16": 11, "17": 9, "18": 8, "19": 12,
    "20": 11, "21": 8, "22": 10, "23": 7, "24": 11, "25": 9, "26": 4, "27": 9,
    "30": 32, "31": 23, "32": 17, "33": 22, "34": 25, "35": 9, "36": 16, "37": 6, "38": 8, "39": 6,
    "40": 26, "41": 25, "42": 14, "43": 9, "44": 13, "45": 20, "46": 18, "47": 18, "48": 12, "49": 7,
    "50": 25, "51": 8, "52": 12, "53": 9, "54": 16, "55": 15, "56": 9, "57": 18, "58": 7,
    "60": 15, "61": 8, "62": 11, "63": 9, "64": 9, "65": 22, "66": 13, "67": 13,
    "70": 10, "71": 13, "72": 10, "73": 7, "74": 3, "75": 3, "76": 7, "77": 8,
    "80": 23, "81": 8, "82": 8, "83": 3, "84": 19, "85": 4, "86": 8,
    "90": 16, "91": 7, "92": 10, "93": 11, "94": 11, "95": 8, "96": 13,
}

# District codes outside the normal range that are in use
DISTRICT_SPECIAL_CASES = {"44": (95,)}

CITIZENSHIP_TYPES = {
    0: Citizenship.FOREIGN,
    1: Citizenship.CITIZEN,
    2: Citizenship.CITIZEN,
    3: Citizenship.CITIZEN,
    4: Citizenship.CITIZEN,
    5: Citizenship.CITIZEN,
    6: Citizenship.FOREIGN,
    7: Citizenship.FOREIGN,
    8: Citizenship.RESIDENT,
}


def _is_valid_location(province: str, district: str) -> bool:
    if province not in DISTRICT_MAX_VALUE:
        return False
    code = int(district)
    # District 99 is used for the provincial center
    if code == 99 or code in DISTRICT_SPECIAL_CASES.get(province, ()):
        return True
    return 1 <= code <= DISTRICT_MAX_VALUE[province]


def checksum(id_number: str) -> Optional[int]:
    if not isinstance(id_number, str) or not METADATA.regexp.fullmatch(id_number):
        return None
    digits = digits_of(normalize(id_number)[:12])
    return modulus_overflow_mod10(weighted_modulus_digit(digits, WEIGHTS, 11))


def validate(id_number: str) -> bool:
    """Validate a Thai national ID number.

    Examples:
        >>> validate("3-1006-00123-45-0")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    match = METADATA.regexp.fullmatch(id_number)
    if not match:
        return False
    if not _is_valid_location(match.group("province"), match.group("district")):
        return False
    return checksum(id_number) == int(match.group("checksum"))


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    match = METADATA.regexp.fullmatch(id_number)
    citizenship_type = int(match.group("citizenship"))
    return {
        "citizenship_type": citizenship_type,
        "citizenship": CITIZENSHIP_TYPES[citizenship_type],
        "province_code": match.group("province"),
        "district_code": match.group("district"),
        "serial_number": normalize(match.group("sn")),
        "checksum": int(match.group("checksum")),
    }
