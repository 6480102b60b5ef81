"""Calendar helpers used when decoding birth dates."""

from datetime import date
from typing import Optional


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check whether a year/month/day triple names a real calendar day.

    Examples:
        >>> is_valid_date(2000, 2, 29)
        True
        >>> is_valid_date(1900, 2, 29)
        False
        >>> is_valid_date(2020, 13, 1)
        False
    """
    if not 1 <= year <= 9999 or not 1 <= month <= 12 or day < 1:
        return False
    days = _DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        days = 29
    return day <= days


def to_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, returning None instead of raising for impossible days."""
    if not is_valid_date(year, month, day):
        return None
    return date(year, month, day)


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Calculate age in whole years.

    Args:
        birth_date: Date of birth.
        today: Reference date (default: the current date).

    Returns:
        Completed years between ``birth_date`` and ``today``.
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def resolve_two_digit_year(yy: int, today: Optional[date] = None) -> int:
    """Expand a two-digit year to the most recent year not in the future.

    Examples:
        >>> resolve_two_digit_year(85, date(2024, 1, 1))
        1985
        >>> resolve_two_digit_year(10, date(2024, 1, 1))
        2010
    """
    today = today or date.today()
    century = today.year // 100 * 100
    year = century + yy
    if year > today.year:
        year -= 100
    return year
