"""Tests for the country modules of the Americas."""

from datetime import date

import pytest

from national_ids.countries import arg, bra, can, chl, col, mex, usa, ven
from national_ids.models import Gender


@pytest.mark.parametrize(
    "module,valid,invalid",
    [
        (arg, "12.345.678", "12.345.67"),
        (bra, "111.444.777-35", "111.444.777-36"),
        (can, "123456782", "123456783"),
        (chl, "12.345.678-5", "12.345.678-6"),
        (col, "12.345.678-8", "12.345.678-9"),
        (mex, "HEGG560427MVZRRL04", "HEGG560427MVZRRL05"),
        (usa, "123-45-6789", "000-45-6789"),
        (ven, "V-12345678", "X-12345678"),
    ],
)
def test_valid_and_invalid(module, valid, invalid):
    assert module.validate(valid) is True
    assert module.validate(invalid) is False


class TestUnitedStates:
    """Tests for the Social Security Number."""

    @pytest.mark.parametrize(
        "number",
        ["666-45-6789", "900-45-6789", "123-00-6789", "123-45-0000", "123456789", "123-45-678"],
    )
    def test_rejected(self, number):
        assert not usa.validate(number)

    def test_parse(self):
        assert usa.parse("123-45-6789") == {
            "area_number": "123",
            "group_number": "45",
            "serial_number": "6789",
        }

    def test_parse_invalid(self):
        assert usa.parse("000-45-6789") is None


class TestCanada:
    def test_separators(self):
        assert can.validate("123 456 782")
        assert can.validate("123-456-782")

    def test_unassigned_prefix(self):
        assert not can.validate("823456782")

    def test_parse(self):
        info = can.parse("123456782")
        assert info["temporary_resident"] is False
        assert info["checksum"] == 2


class TestMexico:
    """Tests for the CURP."""

    def test_parse(self):
        info = mex.parse("HEGG560427MVZRRL04")
        assert info["birth_date"] == date(1956, 4, 27)
        assert info["gender"] == Gender.FEMALE
        assert info["location"] == "VZ"
        assert info["checksum"] == 4

    def test_lowercase_accepted(self):
        assert mex.validate("hegg560427mvzrrl04")

    def test_checksum(self):
        assert mex.checksum("HEGG560427MVZRRL04") == 4


class TestSouthAmerica:
    def test_brazil_unformatted(self):
        assert bra.validate("11144477735")

    def test_brazil_parse(self):
        info = bra.parse("111.444.777-35")
        assert info["fiscal_region"] == 7
        assert info["checksum"] == "35"

    def test_argentina_plain_digits(self):
        assert arg.validate("12345678")
        assert arg.validate("1234567")

    def test_chile_without_separators(self):
        assert chl.validate("123456785")

    def test_colombia_checksum(self):
        assert col.checksum("12.345.678-8") == 8

    def test_venezuela_types(self):
        assert ven.parse("V-12345678") == {"type": "Venezuelan", "number": "12345678"}
        assert ven.parse("E-12.345.678") == {"type": "Foreign", "number": "12345678"}

    def test_venezuela_trailing_space_rejected(self):
        assert not ven.validate("V-12345678 ")


class TestBrazilGeneralRegistry:
    """RG numbers share the Brazilian module with the CPF."""

    @pytest.mark.parametrize("number", ["12.345.678-2", "11.111.111-X", "11.111.111-0"])
    def test_valid(self, number):
        assert bra.validate(number)

    @pytest.mark.parametrize(
        "number", ["12.345.678-3", "11.111.111-x", "123456782", "12.345.678-2\n"]
    )
    def test_invalid(self, number):
        assert not bra.validate(number)

    def test_no_checksum(self):
        assert bra.checksum("12.345.678-2") is None

    def test_parse(self):
        assert bra.parse("11.111.111-X") == {
            "type": "rg",
            "number": "11111111",
            "check_digit": "X",
        }
        assert bra.parse("111.444.777-35")["type"] == "cpf"
