"""
Unique Master Citizen Number (JMBG / EMŠO) shared by the former Yugoslav states

Format: DDMMYYYRRSSSC
- YYY: last three digits of the birth year, below 800 for the 2000s
- RR: political region of registration
- SSS: serial number, below 500 for men
- C: check digit over the folded digit pairs

Each issuing country supplies a classifier mapping RR to its citizenship
rule; the checks here are common to all of them.
"""

import re
from typing import Callable, Optional

from national_ids.models import Citizenship, Gender
from national_ids.utils.checksums import weighted_modulus_digit
from national_ids.utils.dates import to_date
from national_ids.utils.text import digits_of


JMBG_REGEXP = re.compile(
    r"^(?P<dd>\d{2})(?P<mm>\d{2})(?P<yyy>\d{3})(?P<location>\d{2})(?P<sn>\d{3})(?P<checksum>\d)$",
    re.ASCII,
)

JMBG_NAMES = (
    "Unique Master Citizen Number",
    "JMBG",
    "Jedinstveni matični broj građana",
    "Јединствени матични број грађана",
    "EMŠO",
)

JMBG_LINKS = ("https://en.wikipedia.org/wiki/Unique_Master_Citizen_Number",)

WEIGHTS = [7, 6, 5, 4, 3, 2]

LOCATION_BLACKLIST = frozenset(
    ["20", "40", "90", "97", "98", "99"] + [str(code) for code in range(51, 60)]
)

LocationClassifier = Callable[[int], Citizenship]


def checksum(id_number: str) -> Optional[int]:
    """Compute the JMBG check digit.

    Digit i is added to digit i + 6 before weighting, which is the same as
    applying the weights 7..2 twice over the first twelve digits.
    """
    if not isinstance(id_number, str) or not JMBG_REGEXP.fullmatch(id_number):
        return None
    digits = digits_of(id_number)
    folded = [digits[index] + digits[index + 6] for index in range(6)]
    modulus = weighted_modulus_digit(folded, WEIGHTS, 11)
    return 0 if modulus > 9 else modulus


def parse_jmbg(id_number: str, classify_location: LocationClassifier) -> Optional[dict]:
    """Validate and decode a JMBG.

    Args:
        id_number: Thirteen-digit JMBG.
        classify_location: Maps the two-digit region code to the citizenship
            it implies in the issuing country.

    Returns:
        The decoded fields, or None if the number is not a valid JMBG.
    """
    if not isinstance(id_number, str):
        return None
    match = JMBG_REGEXP.fullmatch(id_number)
    if not match:
        return None
    if checksum(id_number) != int(match.group("checksum")):
        return None
    location = match.group("location")
    if location in LOCATION_BLACKLIST:
        return None
    yyy = int(match.group("yyy"))
    year = (2000 if yyy < 800 else 1000) + yyy
    birth_date = to_date(year, int(match.group("mm")), int(match.group("dd")))
    if birth_date is None:
        return None
    sn = match.group("sn")
    return {
        "birth_date": birth_date,
        "location": location,
        "citizenship": classify_location(int(location)),
        "gender": Gender.MALE if int(sn) < 500 else Gender.FEMALE,
        "serial_number": sn,
        "checksum": int(match.group("checksum")),
    }


def citizens_in(low: int, high: int) -> LocationClassifier:
    """Build a classifier treating region codes low..high as citizens."""

    def classify(location: int) -> Citizenship:
        if low <= location <= high:
            return Citizenship.CITIZEN
        return Citizenship.RESIDENT

    return classify
