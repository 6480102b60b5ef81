"""Tests for the European country modules."""

from datetime import date

import pytest

from national_ids.countries import (
    alb, aut, bel, bgr, che, cyp, cze, deu, dnk, esp, est, fin, fra, gbr, grc, hrv,
    hun, irl, isl, ita, ltu, lux, lva, mda, nld, nor, pol, prt, rou, rus, smr, svk,
    swe, ukr,
)
from national_ids.models import Citizenship, Gender


@pytest.mark.parametrize(
    "module,valid,invalid",
    [
        (alb, "J50101001A", "J51301001A"),
        (aut, "1237010180", "1237010181"),
        (bel, "93051822361", "93051822362"),
        (bgr, "7523169263", "7523169264"),
        (che, "7561234567897", "7561234567898"),
        (cyp, "10259033P", "10259033X"),
        (cze, "7103192745", "7103192746"),
        (deu, "36574261809", "36574261808"),
        (dnk, "070761-4285", "070761-4286"),
        (esp, "12345678Z", "12345678A"),
        (est, "37605030299", "37605030298"),
        (fin, "131052-308T", "131052-308U"),
        (fra, "255081416802538", "255081416802539"),
        (gbr, "AB123456C", "GB123456C"),
        (grc, "094259216", "094259217"),
        (hrv, "69435151530", "69435151531"),
        (hun, "18001010016", "18001010017"),
        (irl, "1234567T", "1234567W"),
        (isl, "120174-3399", "120174-3389"),
        (ita, "RSSMRA85T10A562S", "RSSMRA85T10A562T"),
        (ltu, "38001011812", "38001011813"),
        (lux, "1893120105732", "1893120105733"),
        (lva, "161175-19997", "161175-19998"),
        (mda, "2002000000008", "2002000000009"),
        (nld, "111222333", "111222334"),
        (nor, "01018012371", "01018012372"),
        (pol, "44051401458", "44051401459"),
        (prt, "000000000ZZ4", "000000000ZZ5"),
        (rou, "1800101123450", "1800101123451"),
        (rus, "1234567890", "0000 567890"),
        (smr, "123456789", "SM1234"),
        (svk, "7103192745", "7103192746"),
        (swe, "811218-9876", "811218-9877"),
        (ukr, "2922001236", "2922001237"),
    ],
)
def test_valid_and_invalid(module, valid, invalid):
    assert module.validate(valid) is True
    assert module.validate(invalid) is False


class TestGreatBritain:
    """Tests for the National Insurance Number rules."""

    @pytest.mark.parametrize("number", ["AB 12 34 56 C", "JG103759A", "AB123456D"])
    def test_accepted(self, number):
        assert gbr.validate(number)

    @pytest.mark.parametrize(
        "number",
        ["DA123456C", "AO123456C", "NK123456C", "ZZ123456C", "AB123456E", "ab123456c"],
    )
    def test_rejected(self, number):
        assert not gbr.validate(number)


class TestGermany:
    """Tests for the Steuer-ID."""

    def test_checksum(self):
        assert deu.checksum("36574261809") == 9

    def test_leading_zero_rejected(self):
        assert not deu.validate("06574261809")


class TestFrance:
    """Tests for the NIR."""

    def test_parse(self):
        info = fra.parse("255081416802538")
        assert info["gender"] == Gender.FEMALE
        assert info["birth_year"] == 1955
        assert info["birth_month"] == 8
        assert info["department"] == "14"
        assert info["checksum"] == 38

    def test_spaced_form(self):
        assert fra.validate("2 55 08 14 168 025 38")


class TestNetherlands:
    def test_separators(self):
        assert nld.validate("1112.22.333")
        assert nld.checksum("111222333") == 3


class TestAlbania:
    def test_parse(self):
        info = alb.parse("J50101001A")
        assert info["birth_date"] == date(1995, 1, 1)
        assert info["gender"] == Gender.MALE

    def test_female_month_offset(self):
        info = alb.parse("J55101001A")
        assert info["birth_date"] == date(1995, 1, 1)
        assert info["gender"] == Gender.FEMALE


class TestAustria:
    """Tests for the tax number and social insurance number forms."""

    def test_tax_number(self):
        info = aut.parse("12-345/6782")
        assert info["type"] == "tax_number"
        assert info["tax_office"] == "12"

    def test_social_insurance_number(self):
        info = aut.parse("1237010180")
        assert info["type"] == "social_insurance_number"
        assert info["serial_number"] == "123"
        assert info["birth_date"] == date(1980, 1, 1)


class TestBelgium:
    def test_parse(self):
        info = bel.parse("93051822361")
        assert info["birth_date"] == date(1993, 5, 18)
        assert info["gender"] == Gender.MALE

    def test_separators(self):
        assert bel.validate("93.05.18-223.61")

    def test_surrounding_whitespace_rejected(self):
        assert not bel.validate(" 93051822361")


class TestBirthNumbers:
    """Tests for the Czech and Slovak birth number."""

    def test_parse_czech(self):
        info = cze.parse("7103192745")
        assert info["birth_date"] == date(1971, 3, 19)
        assert info["gender"] == Gender.MALE

    def test_slovak_shares_rules(self):
        assert svk.parse("7103192745") == cze.parse("7103192745")

    def test_slash_separator(self):
        assert cze.validate("710319/2745")


class TestNordics:
    """Tests for the Danish, Finnish, Icelandic, Norwegian and Swedish numbers."""

    def test_denmark(self):
        info = dnk.parse("070761-4285")
        assert info["birth_date"] == date(1961, 7, 7)
        assert info["gender"] == Gender.MALE
        assert dnk.checksum("070761-4285") == 5

    def test_finland(self):
        info = fin.parse("131052-308T")
        assert info["birth_date"] == date(1952, 10, 13)
        assert info["gender"] == Gender.FEMALE

    def test_norway(self):
        info = nor.parse("01018012371")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["gender"] == Gender.MALE
        assert nor.checksum("01018012371") == "71"

    def test_sweden_short_form(self):
        info = swe.parse("811218-9876")
        assert info["birth_date"] == date(1981, 12, 18)
        assert info["gender"] == Gender.MALE

    def test_sweden_long_form(self):
        assert swe.validate("19811218-9876")

    def test_sweden_centenarian_separator(self):
        assert swe.parse("811218+9876")["birth_date"] == date(1881, 12, 18)

    def test_iceland(self):
        assert isl.parse("120174-3399")["birth_date"] == date(1974, 1, 12)


class TestBaltics:
    def test_estonia(self):
        info = est.parse("37605030299")
        assert info["birth_date"] == date(1976, 5, 3)
        assert info["gender"] == Gender.MALE

    def test_lithuania(self):
        info = ltu.parse("38001011812")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["gender"] == Gender.MALE

    def test_latvia(self):
        assert lva.parse("161175-19997")["birth_date"] == date(1975, 11, 16)


class TestCentralEurope:
    def test_poland(self):
        info = pol.parse("44051401458")
        assert info["birth_date"] == date(1944, 5, 14)
        assert info["gender"] == Gender.MALE

    def test_hungary(self):
        info = hun.parse("18001010016")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["gender"] == Gender.MALE
        assert info["citizenship"] == Citizenship.CITIZEN

    def test_bulgaria_1800s_month_offset(self):
        info = bgr.parse("7523169263")
        assert info["birth_date"] == date(1875, 3, 16)
        assert info["gender"] == Gender.MALE

    def test_romania(self):
        info = rou.parse("1800101123450")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["gender"] == Gender.MALE
        assert info["citizenship"] == Citizenship.CITIZEN

    def test_moldova_has_no_parser(self):
        assert not hasattr(mda, "parse")


class TestSouthernEurope:
    def test_italy(self):
        info = ita.parse("RSSMRA85T10A562S")
        assert info["surname"] == "RSS"
        assert info["birth_date"] == date(1985, 12, 10)
        assert info["gender"] == Gender.MALE
        assert info["area_code"] == "A562"

    def test_spain_dni(self):
        info = esp.parse("12345678Z")
        assert info["type"] == "DNI"
        assert info["citizenship"] == Citizenship.CITIZEN

    def test_spain_nie(self):
        info = esp.parse("X1234567L")
        assert info["type"] == "NIE"
        assert info["citizenship"] == Citizenship.FOREIGN

    def test_portugal(self):
        info = prt.parse("123456789ZZ1")
        assert info["civil_number"] == "12345678"
        assert info["civil_check_digit"] == 9
        assert info["version"] == "ZZ"
        assert prt.validate("12345678 9 ZZ1")

    def test_croatia_checksum(self):
        assert hrv.checksum("69435151530") == 0


class TestEasternEurope:
    def test_russia(self):
        assert rus.parse("1234 567890") == {"series": "1234", "number": "567890"}

    def test_ukraine(self):
        info = ukr.parse("2922001236")
        assert info["birth_date"] == date(1980, 1, 1)
        assert info["gender"] == Gender.MALE


class TestSanMarino:
    def test_social_security(self):
        assert smr.parse("123456789") == {"type": "social_security", "number": "123456789"}

    def test_tax_registration(self):
        assert smr.parse("sm12345") == {"type": "tax_registration", "number": "12345"}


class TestPortugalTaxNumber:
    """NIF numbers share the Portuguese module with the citizen card."""

    @pytest.mark.parametrize("number", ["123456789", "501964843", "000000000"])
    def test_valid(self, number):
        assert prt.validate(number)

    @pytest.mark.parametrize("number", ["123456780", "000000001", "12345678", "1234567890"])
    def test_invalid(self, number):
        assert not prt.validate(number)

    def test_checksum(self):
        assert prt.checksum("123456789") == 9
        assert prt.checksum("501964843") == 3

    def test_parse(self):
        assert prt.parse("123456789") == {"type": "tax_number", "checksum": 9}
        assert prt.parse("123456789ZZ1")["type"] == "citizen_card"


class TestUkraineEntityId:
    """EDRPOU codes of legal entities."""

    @pytest.mark.parametrize("number", ["00032129", "14360570", "32855961", "23246880"])
    def test_valid(self, number):
        assert ukr.validate(number)

    @pytest.mark.parametrize(
        "number", ["00032128", "1234567", "123456789", "1234567a", "12345 67"]
    )
    def test_invalid(self, number):
        assert not ukr.validate(number)

    def test_checksum_weights_follow_first_digit(self):
        assert ukr.checksum("00032129") == 9
        assert ukr.checksum("32855961") == 1

    def test_second_pass_collapses_to_zero(self):
        """A remainder of 10 is recomputed with weights raised by two."""
        assert ukr.checksum("23246880") == 0

    def test_parse(self):
        assert ukr.parse("00032129") == {
            "type": "legal_entity",
            "rotated_weights": False,
            "checksum": 9,
        }
        assert ukr.parse("32855961")["rotated_weights"] is True
        assert ukr.parse("2922001236")["type"] == "taxpayer"


class TestGreeceIdentityCard:
    """Identity cards use Greek letters or their Latin look-alikes."""

    @pytest.mark.parametrize("number", ["ΑΒ-123456", "AB123456", "αβ-123456", "ΨΩ654321"])
    def test_valid(self, number):
        assert grc.validate(number)

    @pytest.mark.parametrize(
        "number",
        ["ΑΒ-12345", "ΑΒ-1234567", "QQ-123456", "ΑΒ 123456", "ΑΒ-123456\n", "ΑΒ-١٢٣٤٥٦"],
    )
    def test_invalid(self, number):
        assert not grc.validate(number)

    def test_no_checksum(self):
        assert grc.checksum("ΑΒ-123456") is None
        assert grc.checksum("094259216") == 6
