"""Algorithm primitives shared by the country modules."""

# Check-digit algorithms
from national_ids.utils.checksums import (
    ean13_digit,
    letter_to_number,
    luhn_digit,
    mn_modulus_digit,
    modulus_overflow_mod10,
    verhoeff_check,
    verhoeff_digit,
    weighted_modulus_digit,
)

# Calendar helpers
from national_ids.utils.dates import (
    calculate_age,
    is_leap_year,
    is_valid_date,
    resolve_two_digit_year,
    to_date,
)

# Text processing
from national_ids.utils.text import digits_of, normalize

__all__ = [
    # Checksums
    "luhn_digit",
    "weighted_modulus_digit",
    "mn_modulus_digit",
    "verhoeff_check",
    "verhoeff_digit",
    "ean13_digit",
    "letter_to_number",
    "modulus_overflow_mod10",
    # Dates
    "is_leap_year",
    "is_valid_date",
    "to_date",
    "calculate_age",
    "resolve_two_digit_year",
    # Text
    "normalize",
    "digits_of",
]
