"""Check-digit algorithms shared by the country modules.

All functions operate on sequences of small integers and are free of any
country-specific knowledge.
"""

import string
from typing import Optional, Sequence


# Verhoeff multiplication table (dihedral group D5)
_VERHOEFF_D = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Verhoeff inverse table
_VERHOEFF_INV = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)

# Verhoeff permutation table
_VERHOEFF_P = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)


def luhn_digit(digits: Sequence[int], multipliers_start_by_two: bool = False) -> int:
    """Compute a Luhn check digit.

    The payload is doubled from the second position of the (optionally
    zero-prefixed) sequence. Payloads of even length use the default
    alignment; odd-length payloads set ``multipliers_start_by_two`` so the
    digit next to the check digit is the one doubled.

    Args:
        digits: Payload digits, without the check digit.
        multipliers_start_by_two: Prepend a zero before weighting.

    Returns:
        The check digit (0-9).

    Examples:
        >>> luhn_digit([8, 0, 0, 1, 0, 1, 5, 0, 0, 9, 0, 8])
        7
        >>> luhn_digit([1, 2, 3, 4, 5, 6, 7, 8], False)
        2
    """
    values = [0, *digits] if multipliers_start_by_two else list(digits)
    total = 0
    for index, value in enumerate(values):
        if index % 2 == 0:
            total += value
        else:
            doubled = value * 2
            total += doubled - 9 if doubled > 9 else doubled
    return (10 - total % 10) % 10


def weighted_modulus_digit(
    numbers: Sequence[int],
    weights: Optional[Sequence[int]],
    divisor: int,
    modulus_only: bool = False,
) -> int:
    """Compute a weighted-sum modulus check value.

    Args:
        numbers: Digit values.
        weights: Weight per position, or None for all ones.
        divisor: Modulus divisor.
        modulus_only: Return the raw modulus instead of ``divisor - modulus``.

    Returns:
        The modulus, or ``divisor - modulus``.

    Raises:
        ValueError: If there are more numbers than weights.

    Examples:
        >>> weighted_modulus_digit([1, 2, 3], [3, 2, 1], 11, True)
        10
        >>> weighted_modulus_digit([1, 2, 3], None, 11)
        5
    """
    if weights is None:
        weights = [1] * len(numbers)
    if len(numbers) > len(weights):
        raise ValueError(
            f"Got {len(numbers)} numbers but only {len(weights)} weights"
        )
    modulus = sum(n * w for n, w in zip(numbers, weights)) % divisor
    return modulus if modulus_only else divisor - modulus


def mn_modulus_digit(numbers: Sequence[int], m: int, n: int) -> int:
    """Compute an ISO/IEC 7064 MOD m,n (hybrid system) check digit.

    Args:
        numbers: Payload digits.
        m: Primary modulus (10 for the decimal system).
        n: Secondary modulus (m + 1).

    Returns:
        ``n - product``; callers collapse a result of ``m`` to 0.

    Examples:
        >>> mn_modulus_digit([6, 9, 4, 3, 5, 1, 5, 1, 5, 3], 10, 11)
        10
    """
    product = m
    for number in numbers:
        total = (number + product) % m
        if total == 0:
            total = m
        product = (2 * total) % n
    return n - product


def verhoeff_check(digits: Sequence[int]) -> bool:
    """Check a digit sequence whose last digit is a Verhoeff check digit.

    Args:
        digits: All digits including the trailing check digit.

    Returns:
        True if the sequence is Verhoeff-valid.

    Examples:
        >>> verhoeff_check([2, 3, 6])
        True
        >>> verhoeff_check([2, 3, 7])
        False
    """
    check = 0
    for index, digit in enumerate(reversed(digits)):
        check = _VERHOEFF_D[check][_VERHOEFF_P[index % 8][digit]]
    return check == 0


def verhoeff_digit(digits: Sequence[int]) -> int:
    """Compute the Verhoeff check digit to append to a payload.

    Examples:
        >>> verhoeff_digit([2, 3])
        6
    """
    check = 0
    for index, digit in enumerate(reversed(digits)):
        check = _VERHOEFF_D[check][_VERHOEFF_P[(index + 1) % 8][digit]]
    return _VERHOEFF_INV[check]


def ean13_digit(numbers: Sequence[int]) -> int:
    """Compute an EAN-13 check digit over the first twelve digits.

    Odd positions (1-based) carry weight 1, even positions weight 3.

    Examples:
        >>> ean13_digit([7, 5, 6, 1, 2, 3, 4, 5, 6, 7, 8, 9])
        7
    """
    total = sum(n * (3 if index % 2 else 1) for index, n in enumerate(numbers))
    return (10 - total % 10) % 10


def letter_to_number(letter: str, capital: bool = True) -> int:
    """Map a single letter to its alphabet position (A=1 ... Z=26).

    Args:
        letter: A single ASCII letter.
        capital: Expect an upper case letter (otherwise lower case).

    Returns:
        Position of the letter in the alphabet.

    Raises:
        ValueError: If ``letter`` is not exactly one ASCII letter of the
            expected case.
    """
    alphabet = string.ascii_uppercase if capital else string.ascii_lowercase
    if not isinstance(letter, str) or len(letter) != 1 or letter not in alphabet:
        raise ValueError(f"Expected a single letter, got {letter!r}")
    return ord(letter) - (64 if capital else 96)


def modulus_overflow_mod10(modulus: int) -> int:
    """Collapse a two-digit modulus result into a single digit."""
    return modulus % 10 if modulus > 9 else modulus
