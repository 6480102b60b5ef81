"""Tests for the shared checksum, date and text helpers."""

from datetime import date

import pytest

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
from national_ids.utils.dates import (
    calculate_age,
    is_leap_year,
    is_valid_date,
    resolve_two_digit_year,
    to_date,
)
from national_ids.utils.text import digits_of, normalize


class TestLuhn:
    """Tests for luhn_digit."""

    def test_even_length_payload(self):
        """South African payload produces its trailing check digit."""
        assert luhn_digit(digits_of("800101500908")) == 7

    def test_default_alignment(self):
        assert luhn_digit([1, 2, 3, 4, 5, 6, 7, 8]) == 2

    def test_zero_prefixed_alignment(self):
        """Odd payloads double the digit next to the check digit."""
        assert luhn_digit(digits_of("12345678"), True) != luhn_digit(digits_of("12345678"))
        assert luhn_digit(digits_of("000000001"), True) == 8

    def test_all_zero_payload(self):
        assert luhn_digit([0, 0, 0, 0]) == 0


class TestWeightedModulus:
    """Tests for weighted_modulus_digit."""

    def test_modulus_only(self):
        assert weighted_modulus_digit([1, 2, 3], [3, 2, 1], 11, True) == 10

    def test_complement(self):
        """Without modulus_only the result is divisor - modulus."""
        assert weighted_modulus_digit([1, 2, 3], None, 11) == 5

    def test_complement_of_zero_is_divisor(self):
        assert weighted_modulus_digit([0, 0], [1, 1], 11) == 11

    def test_more_numbers_than_weights(self):
        with pytest.raises(ValueError, match="weights"):
            weighted_modulus_digit([1, 2, 3], [1, 2], 11)

    def test_fewer_numbers_than_weights(self):
        """Extra weights are ignored."""
        assert weighted_modulus_digit([1], [2, 3, 4], 10, True) == 2


class TestMnModulus:
    """Tests for the ISO 7064 MOD 11,10 hybrid digit."""

    def test_croatian_oib(self):
        """OIB 69435151530: a result of 10 collapses to 0."""
        assert mn_modulus_digit(digits_of("6943515153"), 10, 11) == 10

    def test_result_range(self):
        for payload in ("0000000000", "1234567890", "9999999999"):
            assert 1 <= mn_modulus_digit(digits_of(payload), 10, 11) <= 10


class TestVerhoeff:
    """Tests for the Verhoeff check."""

    def test_valid_sequence(self):
        assert verhoeff_check([2, 3, 6]) is True

    def test_invalid_sequence(self):
        assert verhoeff_check([2, 3, 7]) is False

    def test_digit_matches_check(self):
        """The computed digit always yields a valid sequence."""
        payload = digits_of("23412341234")
        assert verhoeff_digit(payload) == 6
        assert verhoeff_check(payload + [verhoeff_digit(payload)])

    def test_detects_transposition(self):
        assert verhoeff_check(digits_of("234123412346"))
        assert not verhoeff_check(digits_of("324123412346"))


class TestSmallHelpers:
    """Tests for EAN-13, letter positions and overflow collapsing."""

    def test_ean13_swiss_ahv(self):
        assert ean13_digit(digits_of("756123456789")) == 7

    def test_ean13_all_zero(self):
        assert ean13_digit([0] * 12) == 0

    def test_letter_to_number_upper(self):
        assert letter_to_number("A") == 1
        assert letter_to_number("Z") == 26

    def test_letter_to_number_lower(self):
        assert letter_to_number("c", capital=False) == 3

    @pytest.mark.parametrize("value", ["", "AB", "1", None, "É", "Ω"])
    def test_letter_to_number_rejects(self, value):
        with pytest.raises(ValueError):
            letter_to_number(value)

    def test_letter_to_number_rejects_wrong_case(self):
        with pytest.raises(ValueError):
            letter_to_number("a")
        with pytest.raises(ValueError):
            letter_to_number("A", capital=False)

    def test_overflow_collapse(self):
        assert modulus_overflow_mod10(7) == 7
        assert modulus_overflow_mod10(10) == 0
        assert modulus_overflow_mod10(11) == 1


class TestDates:
    """Tests for the calendar helpers."""

    def test_leap_years(self):
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert not is_leap_year(1900)
        assert not is_leap_year(2023)

    def test_valid_dates(self):
        assert is_valid_date(2000, 2, 29)
        assert is_valid_date(1999, 12, 31)

    @pytest.mark.parametrize(
        "year,month,day",
        [(1900, 2, 29), (2020, 13, 1), (2020, 0, 1), (2020, 4, 31), (2020, 1, 0), (0, 1, 1)],
    )
    def test_invalid_dates(self, year, month, day):
        assert not is_valid_date(year, month, day)

    def test_to_date(self):
        assert to_date(1984, 4, 6) == date(1984, 4, 6)
        assert to_date(1984, 2, 30) is None

    def test_calculate_age(self):
        today = date(2024, 6, 15)
        assert calculate_age(date(1984, 6, 15), today) == 40
        assert calculate_age(date(1984, 6, 16), today) == 39

    def test_two_digit_year_past(self):
        assert resolve_two_digit_year(85, date(2024, 1, 1)) == 1985

    def test_two_digit_year_current_century(self):
        assert resolve_two_digit_year(10, date(2024, 1, 1)) == 2010

    def test_two_digit_year_never_in_future(self):
        assert resolve_two_digit_year(24, date(2024, 1, 1)) == 2024
        assert resolve_two_digit_year(25, date(2024, 1, 1)) == 1925


class TestText:
    """Tests for normalize and digits_of."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("123-45-6789", "123456789"),
            ("756.1234.5678.97", "7561234567897"),
            ("000101/0009", "0001010009"),
            ("1234 5678 9012", "123456789012"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize(raw) == expected

    def test_normalize_is_idempotent(self):
        once = normalize("12.345.678-5")
        assert normalize(once) == once

    def test_digits_of(self):
        assert digits_of("0907") == [0, 9, 0, 7]

    def test_digits_of_rejects_letters(self):
        with pytest.raises(ValueError):
            digits_of("12X")
