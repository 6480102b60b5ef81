"""Text processing utility functions."""

import re


# Separators that may appear between the groups of an identifier
_SEPARATOR_PATTERN = re.compile(r"[\s\-./]+")


def normalize(text: str) -> str:
    """Strip separators from an identifier string.

    Removes whitespace, dashes, dots and slashes. Applying it twice yields the
    same result as applying it once.

    Args:
        text: Raw identifier string.

    Returns:
        The identifier without separators.

    Examples:
        >>> normalize("123-45-6789")
        '123456789'
        >>> normalize("756.1234.5678.97")
        '7561234567897'
        >>> normalize("000101/0009")
        '0001010009'
    """
    if not text:
        return ""
    return _SEPARATOR_PATTERN.sub("", text)


def digits_of(text: str) -> list[int]:
    """Convert a string of decimal digits into a list of ints.

    Args:
        text: String containing only the characters 0-9.

    Returns:
        List of digit values in order.

    Raises:
        ValueError: If any character is not a decimal digit.
    """
    return [int(char) for char in text]
