"""Tests for the shared JMBG rules and the countries issuing it."""

from datetime import date

import pytest

from national_ids.countries import bih, mkd, mne, srb, svn, yugoslavia
from national_ids.models import Citizenship, Gender


class TestChecksum:
    """Tests for the folded mod-11 check digit."""

    def test_checksum(self):
        assert yugoslavia.checksum("0101990150002") == 2

    def test_remainder_ten_collapses_to_zero(self):
        assert yugoslavia.checksum("0101990200000") == 0

    def test_format_mismatch(self):
        assert yugoslavia.checksum("010199015000") is None
        assert yugoslavia.checksum(None) is None


class TestParseJmbg:
    """Tests for parse_jmbg."""

    @pytest.fixture
    def classify(self):
        return yugoslavia.citizens_in(10, 19)

    def test_male_citizen(self, classify):
        info = yugoslavia.parse_jmbg("0101990150002", classify)
        assert info["birth_date"] == date(1990, 1, 1)
        assert info["location"] == "15"
        assert info["gender"] == Gender.MALE
        assert info["citizenship"] == Citizenship.CITIZEN
        assert info["serial_number"] == "000"

    def test_female_serial(self, classify):
        assert yugoslavia.parse_jmbg("0101990155004", classify)["gender"] == Gender.FEMALE

    def test_resident_region(self, classify):
        info = yugoslavia.parse_jmbg("0101990300004", classify)
        assert info["citizenship"] == Citizenship.RESIDENT

    def test_blacklisted_region(self, classify):
        assert yugoslavia.parse_jmbg("0101990200000", classify) is None

    def test_bad_checksum(self, classify):
        assert yugoslavia.parse_jmbg("0101990150003", classify) is None

    def test_2000s_year(self, classify):
        assert yugoslavia.parse_jmbg("0101006500006", classify)["birth_date"] == date(2006, 1, 1)


class TestIssuingCountries:
    """Each issuing country decides which regions hold its citizens."""

    @pytest.mark.parametrize(
        "module,number",
        [
            (bih, "0101990150002"),
            (mkd, "0101990410004"),
            (mne, "0101990210005"),
            (srb, "0101990710008"),
            (svn, "0101006500006"),
        ],
    )
    def test_citizen_of_issuing_country(self, module, number):
        assert module.validate(number)
        assert module.parse(number)["citizenship"] == Citizenship.CITIZEN

    def test_foreign_region_is_resident(self):
        assert srb.validate("0101990150002")
        assert srb.parse("0101990150002")["citizenship"] == Citizenship.RESIDENT

    @pytest.mark.parametrize("module", [bih, mkd, mne, srb, svn])
    def test_rejects_bad_checksum(self, module):
        assert not module.validate("0101990150003")
        assert module.checksum("0101990150003") == 2

    def test_shared_metadata(self):
        assert srb.METADATA.regexp is yugoslavia.JMBG_REGEXP
        assert srb.METADATA.iso3166_alpha2 == "RS"
