"""Tests for the Asian and Pacific country modules."""

from datetime import date

import pytest

from national_ids.countries import (
    aus, bgd, chn, hkg, idn, ind, jpn, kaz, kor, lka, mac, mys, npl, nzl, pak, phl,
    png, sgp, tha, twn, vnm,
)
from national_ids.models import Citizenship, Gender


@pytest.mark.parametrize(
    "module,valid,invalid",
    [
        (aus, "2123456701", "2123456711"),
        (bgd, "1592824588424", "159282458842"),
        (chn, "11010219840406970X", "110102198404069701"),
        (hkg, "A123456(3)", "A123456(4)"),
        (idn, "3201011001900002", "3201011013900002"),
        (ind, "234123412346", "234123412347"),
        (jpn, "123456789018", "123456789019"),
        (kaz, "900101300007", "900101300008"),
        (kor, "800101-1234567", "801301-1234567"),
        (lka, "853400937V", "85340093V"),
        (mac, "1234567(8)", "2234567(8)"),
        (mys, "800101-01-1234", "801301-01-1234"),
        (npl, "12345678901", "1234567890"),
        (nzl, "49091850", "49091851"),
        (pak, "12345-1234567-1", "12345-1234567"),
        (phl, "123456789012", "111111111111"),
        (png, "1234567890", "123456789"),
        (sgp, "S1234567D", "S1234567A"),
        (tha, "3100600123450", "1234567890121"),
        (twn, "A123456789", "A123456788"),
        (vnm, "001089000123", "12345678"),
    ],
)
def test_valid_and_invalid(module, valid, invalid):
    assert module.validate(valid) is True
    assert module.validate(invalid) is False


class TestChina:
    """Tests for the Resident Identity Card Number."""

    @pytest.mark.parametrize(
        "number", ["11010219840406970X", "11010219840406970x", "110101199003077715", "11010119900307109X"]
    )
    def test_accepted(self, number):
        assert chn.validate(number)

    @pytest.mark.parametrize(
        "number",
        [
            "110101199003077710",  # Invalid checksum
            "12345678901234567X",  # Invalid format
            "11010119900307",  # Too short
            "110101199002307719",  # February 30th
        ],
    )
    def test_rejected(self, number):
        assert not chn.validate(number)

    def test_checksum(self):
        assert chn.checksum("11010219840406970X") == "X"
        assert chn.checksum("110101199003077715") == "5"

    def test_parse(self):
        info = chn.parse("110101199003077715")
        assert info["birth_date"] == date(1990, 3, 7)
        assert info["gender"] == Gender.MALE
        assert info["location"] == "110101"


class TestEastAsia:
    def test_hong_kong_without_parentheses(self):
        assert hkg.validate("A1234563")

    def test_japan_checksum(self):
        assert jpn.checksum("123456789018") == 8

    def test_korea(self):
        info = kor.parse("800101-1234567")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["gender"] == Gender.MALE
        assert info["citizenship"] == Citizenship.CITIZEN

    def test_taiwan(self):
        info = twn.parse("A123456789")
        assert info["location"] == "A"
        assert info["gender"] == Gender.MALE
        assert info["checksum"] == 9

    def test_taiwan_gender_digit(self):
        assert not twn.validate("A323456789")

    def test_macau(self):
        info = mac.parse("1234567(8)")
        assert info["document_type"] == "first generation"
        assert info["serial_number"] == "2345678"


class TestSouthAsia:
    def test_india_spaced(self):
        assert ind.validate("2341 2341 2346")
        assert ind.checksum("2341 2341 2346") == 6

    def test_india_first_digit(self):
        assert not ind.validate("134123412346")

    def test_sri_lanka_old_format(self):
        info = lka.parse("853400937V")
        assert info["gender"] == Gender.MALE
        assert info["voter"] is True
        assert info["birth_date"].year == 1985

    def test_pakistan(self):
        assert pak.parse("12345-1234567-1")["gender"] == Gender.MALE
        assert pak.validate("1234512345671")

    def test_bangladesh_parse(self):
        info = bgd.parse("1592824588424")
        assert info["district"] == "15"
        assert info["serial_number"] == "588424"


class TestSouthEastAsia:
    def test_thailand(self):
        info = tha.parse("3100600123450")
        assert info["citizenship"] == Citizenship.CITIZEN
        assert info["province_code"] == "10"
        assert info["district_code"] == "06"
        assert info["checksum"] == 0

    def test_thailand_separators(self):
        assert tha.validate("3-1006-00123-45-0")

    def test_vietnam(self):
        info = vnm.parse("001089000123")
        assert info["province_code"] == "001"
        assert info["birth_year"] == 1989
        assert info["gender"] == Gender.MALE

    def test_vietnam_legacy(self):
        info = vnm.parse("123456789")
        assert info["serial_number"] == "123456789"
        assert info["birth_year"] is None

    def test_singapore(self):
        info = sgp.parse("S1234567D")
        assert info["citizenship"] == Citizenship.CITIZEN
        assert info["prefix"] == "S"
        assert sgp.checksum("S1234567D") == "D"

    def test_singapore_2000s(self):
        assert sgp.validate("T1234567J")

    def test_malaysia(self):
        info = mys.parse("800101-01-1234")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["place_of_birth"] == "01"
        assert info["gender"] == Gender.FEMALE

    def test_indonesia(self):
        info = idn.parse("3201011001900002")
        assert info["birth_date"] == date(1990, 1, 10)
        assert info["gender"] == Gender.MALE

    def test_indonesia_female_day_offset(self):
        info = idn.parse("3201015001900002")
        assert info["birth_date"] == date(1990, 1, 10)
        assert info["gender"] == Gender.FEMALE

    def test_philippines_separators(self):
        assert phl.validate("1234-5678901-2")


class TestCentralAsia:
    def test_kazakhstan(self):
        info = kaz.parse("900101300007")
        assert info["birth_date"] == date(1990, 1, 1)
        assert info["gender"] == Gender.MALE


class TestOceania:
    def test_australia_separators(self):
        assert aus.validate("2123 45670 1")

    def test_australia_parse(self):
        info = aus.parse("2123456701")
        assert info["card_number"] == "21234567"
        assert info["checksum"] == 0
        assert info["issue_number"] == 1
        assert info["individual_reference"] is None

    @pytest.mark.parametrize("number", ["49091850", "35901981", "49-091-850"])
    def test_new_zealand_ird(self, number):
        assert nzl.parse(number)["type"] == "ird_number"

    def test_new_zealand_driver_licence(self):
        assert nzl.parse("DL123456") == {"type": "driver_licence", "prefix": "DL"}
