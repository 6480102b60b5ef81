"""
Brazil identification numbers

Individual taxpayer registry number (Cadastro de Pessoas Físicas, CPF):
XXX.XXX.XXX-DD with two modulus 11 check digits. The ninth digit is the fiscal
region of registration. Numbers made of a single repeated digit pass the
checksum but are never issued.

General registry number (Registro Geral, RG): XX.XXX.XXX-C, where C is a digit
or X (standing for 11). The eight digits weighted 2..9 plus a hundred times C
must be divisible by 11. Issuing states differ, so no check digit is computed.
"""

import re
from typing import Optional

from national_ids.models import IdMetadata
from national_ids.utils.text import digits_of, normalize


METADATA = IdMetadata(
    iso3166_alpha2="BR",
    min_length=11,
    max_length=14,
    parsable=True,
    checksum=True,
    regexp=re.compile(
        r"^(?:\d{3}\.?\d{3}\.?\d{3}-?\d{2}"
        r"|\d{2}\.\d{3}\.\d{3}-[\dX])$",
        re.ASCII,
    ),
    names=("Cadastro de Pessoas Físicas", "CPF", "Registro Geral", "RG"),
    links=(
        "https://en.wikipedia.org/wiki/CPF_number",
        "https://en.wikipedia.org/wiki/Brazilian_identity_card",
    ),
)

CPF_REGEXP = re.compile(r"^\d{3}\.?\d{3}\.?\d{3}-?\d{2}$", re.ASCII)
RG_REGEXP = re.compile(r"^\d{2}\.\d{3}\.\d{3}-[\dX]$", re.ASCII)

RG_WEIGHTS = [2, 3, 4, 5, 6, 7, 8, 9]


def _check_digit(digits: list[int]) -> int:
    start = len(digits) + 1
    modulus = sum(d * (start - i) for i, d in enumerate(digits)) % 11
    check = 11 - modulus
    return 0 if check > 9 else check


def _validate_rg(id_number: str) -> bool:
    number = normalize(id_number)
    check = 11 if number[8] == "X" else int(number[8])
    total = sum(d * w for d, w in zip(digits_of(number[:8]), RG_WEIGHTS))
    return (total + check * 100) % 11 == 0


def checksum(id_number: str) -> Optional[str]:
    """Return both CPF check digits as a two-character string.

    RG numbers have no computable check digit and give None.
    """
    if not isinstance(id_number, str) or not CPF_REGEXP.fullmatch(id_number):
        return None
    digits = digits_of(normalize(id_number)[:9])
    first = _check_digit(digits)
    second = _check_digit(digits + [first])
    return f"{first}{second}"


def validate(id_number: str) -> bool:
    """Validate a CPF or RG number.

    Examples:
        >>> validate("111.444.777-35")
        True
        >>> validate("111.111.111-11")
        False
        >>> validate("12.345.678-2")
        True
    """
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    if RG_REGEXP.fullmatch(id_number):
        return _validate_rg(id_number)
    if not CPF_REGEXP.fullmatch(id_number):
        return False
    number = normalize(id_number)
    if len(set(number)) == 1:
        return False
    return checksum(id_number) == number[9:]


def parse(id_number: str) -> Optional[dict]:
    if not validate(id_number):
        return None
    number = normalize(id_number)
    if RG_REGEXP.fullmatch(id_number):
        return {
            "type": "rg",
            "number": number[:8],
            "check_digit": number[8],
        }
    return {
        "type": "cpf",
        "fiscal_region": int(number[8]),
        "checksum": number[9:],
    }
