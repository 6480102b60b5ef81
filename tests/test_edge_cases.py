"""Edge case tests run against every supported country."""

import pytest

from national_ids import validate_national_id
from national_ids.core.registry import ALIASES, COUNTRIES

ALL_CODES = list(COUNTRIES)

ARABIC_INDIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")
FULLWIDTH_DIGITS = str.maketrans("0123456789", "０１２３４５６７８９")


class TestFixtureCoverage:
    def test_every_country_has_a_vector(self, valid_ids):
        assert sorted(valid_ids) == sorted(ALL_CODES)


class TestMalformedInput:
    """Country validators reject malformed input without raising."""

    @pytest.mark.parametrize("code", ALL_CODES)
    @pytest.mark.parametrize("value", [None, 12345, 1.5, [], b"123456789", ""])
    def test_rejects_non_strings_and_empty(self, code, value):
        assert COUNTRIES[code].validate(value) is False

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_rejects_garbage(self, code):
        assert COUNTRIES[code].validate("not an id!") is False

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_rejects_surrounding_whitespace(self, code, valid_ids):
        number = valid_ids[code]
        assert COUNTRIES[code].validate(f" {number}") is False
        assert COUNTRIES[code].validate(f"{number} ") is False

    @pytest.mark.parametrize("code", ALL_CODES)
    @pytest.mark.parametrize("suffix", ["\n", "\r\n", "\t"])
    def test_rejects_trailing_line_break(self, code, suffix, valid_ids):
        handler = COUNTRIES[code]
        number = valid_ids[code] + suffix

        assert handler.validate(number) is False
        assert validate_national_id(code, number).is_valid is False
        if handler.parse is not None:
            assert handler.parse(number) is None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_rejects_non_ascii_digits(self, code, valid_ids):
        """Arabic-Indic and fullwidth digits are not decimal digits of an ID."""
        number = valid_ids[code]
        for table in (ARABIC_INDIC_DIGITS, FULLWIDTH_DIGITS):
            translated = number.translate(table)
            assert translated != number
            assert COUNTRIES[code].validate(translated) is False
            result = validate_national_id(code, translated)
            assert result.is_valid is False
            assert result.error_message is None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_checksum_of_non_ascii_digits(self, code, valid_ids):
        checksum = COUNTRIES[code].checksum
        if checksum is None:
            pytest.skip("country has no checksum")
        assert checksum(valid_ids[code].translate(ARABIC_INDIC_DIGITS)) is None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_parse_garbage(self, code):
        parse = COUNTRIES[code].parse
        if parse is None:
            pytest.skip("country has no parser")
        assert parse("not an id!") is None
        assert parse(None) is None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_checksum_garbage(self, code):
        checksum = COUNTRIES[code].checksum
        if checksum is None:
            pytest.skip("country has no checksum")
        assert checksum("not an id!") is None
        assert checksum(None) is None


class TestValidVectors:
    """Every country accepts its test vector through the public API."""

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_validates(self, code, valid_ids):
        result = validate_national_id(code, valid_ids[code])
        assert result.is_valid is True
        assert result.error_message is None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_alpha2_alias_matches_canonical(self, code, valid_ids):
        alpha2 = COUNTRIES[code].metadata.iso3166_alpha2
        assert validate_national_id(alpha2.lower(), valid_ids[code]) == validate_national_id(
            code, valid_ids[code]
        )

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_parsable_countries_extract_info(self, code, valid_ids):
        handler = COUNTRIES[code]
        result = validate_national_id(code, valid_ids[code])
        if handler.metadata.parsable:
            assert isinstance(result.extracted_info, dict)
            assert result.extracted_info
        else:
            assert result.extracted_info is None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_checksum_of_valid_number(self, code, valid_ids):
        checksum = COUNTRIES[code].checksum
        if checksum is None:
            pytest.skip("country has no checksum")
        assert checksum(valid_ids[code]) is not None

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_repeatable(self, code, valid_ids):
        first = validate_national_id(code, valid_ids[code])
        second = validate_national_id(code, valid_ids[code])
        assert first == second


class TestMetadata:
    """Country metadata agrees with the functions each module exposes."""

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_parsable_flag(self, code):
        handler = COUNTRIES[code]
        assert handler.metadata.parsable == (handler.parse is not None)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_checksum_flag(self, code):
        handler = COUNTRIES[code]
        assert handler.metadata.checksum == (handler.checksum is not None)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_pattern_is_anchored(self, code):
        pattern = COUNTRIES[code].metadata.regexp.pattern
        assert pattern.startswith("^")
        assert pattern.endswith("$")

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_length_bounds(self, code, valid_ids):
        metadata = COUNTRIES[code].metadata
        assert 0 < metadata.min_length <= metadata.max_length

    def test_alpha2_codes_unique(self):
        codes = [handler.metadata.iso3166_alpha2 for handler in COUNTRIES.values()]
        assert len(codes) == len(set(codes))

    def test_aliases_target_supported_countries(self):
        assert set(ALIASES.values()) <= set(COUNTRIES)
        assert ALIASES["UK"] == "GBR"
