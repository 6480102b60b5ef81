"""Unit tests for the national ID recognizers."""

import pytest

from national_ids.recognizers.national_id import (
    NationalIdRecognizer,
    create_national_id_recognizers,
    entity_for,
)
from national_ids.recognizers.registry import get_supported_entities


class TestNationalIdRecognizer:
    """Tests for the per-country recognizer."""

    @pytest.fixture
    def recognizer(self):
        return NationalIdRecognizer("CHN")

    def test_entity_and_name(self, recognizer):
        assert recognizer.supported_entities == ["CHN_NATIONAL_ID"]
        assert recognizer.name == "ChnNationalIdRecognizer"

    def test_valid_id_card(self, recognizer):
        assert recognizer.validate_result("110101199003077715") is True

    def test_invalid_checksum(self, recognizer):
        assert recognizer.validate_result("110101199003077711") is False

    def test_lowercase_x(self, recognizer):
        assert recognizer.validate_result("11010119900307109x") is True

    def test_finds_id_in_text(self, recognizer):
        text = "身份证号 11010219840406970X 已登记"
        results = recognizer.analyze(text, entities=["CHN_NATIONAL_ID"])

        assert len(results) == 1
        assert text[results[0].start:results[0].end] == "11010219840406970X"
        assert results[0].score == 1.0

    def test_ignores_digits_inside_longer_number(self, recognizer):
        results = recognizer.analyze("ref 911010219840406970X1", entities=["CHN_NATIONAL_ID"])
        assert results == []

    def test_context_words(self, recognizer):
        assert "id number" in recognizer.context
        assert "resident identity card number" in recognizer.context


class TestValidationFiltersMatches:
    """Pattern matches that fail validation are dropped."""

    def test_forbidden_prefix_dropped(self):
        recognizer = NationalIdRecognizer("GBR")
        results = recognizer.analyze(
            "NI numbers GB123456C and AB123456C", entities=["GBR_NATIONAL_ID"]
        )

        assert len(results) == 1
        assert results[0].entity_type == "GBR_NATIONAL_ID"

    def test_ssn_in_sentence(self):
        recognizer = NationalIdRecognizer("USA")
        text = "My SSN is 123-45-6789."
        results = recognizer.analyze(text, entities=["USA_NATIONAL_ID"])

        assert [(r.start, r.end) for r in results] == [(10, 21)]

    def test_non_ascii_digits_ignored(self):
        recognizer = NationalIdRecognizer("USA")
        assert recognizer.validate_result("١٢٣-٤٥-٦٧٨٩") is False
        assert recognizer.analyze("SSN １２３-４５-６７８９", entities=["USA_NATIONAL_ID"]) == []

    def test_never_assigned_area_ignored(self):
        recognizer = NationalIdRecognizer("USA")
        assert recognizer.analyze("SSN 000-45-6789", entities=["USA_NATIONAL_ID"]) == []


class TestCreateRecognizers:
    """Tests for the recognizer factory."""

    def test_all_countries(self):
        recognizers = create_national_id_recognizers()
        assert len(recognizers) == 80
        assert len({r.name for r in recognizers}) == 80

    def test_selected_countries_with_aliases(self):
        recognizers = create_national_id_recognizers(["uk", "ZAF"], supported_language="de")
        assert [r.supported_entities[0] for r in recognizers] == [
            "GBR_NATIONAL_ID",
            "ZAF_NATIONAL_ID",
        ]
        assert all(r.supported_language == "de" for r in recognizers)

    def test_unsupported_country(self):
        with pytest.raises(ValueError, match="Unsupported country code"):
            create_national_id_recognizers(["XXX"])

    def test_supported_entities(self):
        entities = get_supported_entities()
        assert len(entities) == 80
        assert entities[0] == entity_for("USA") == "USA_NATIONAL_ID"


class TestAnalyzer:
    """Tests for the analyzer with national ID support."""

    @pytest.fixture(scope="class")
    def analyzer(self):
        pytest.importorskip("en_core_web_sm")
        from national_ids.recognizers.registry import create_analyzer_with_national_id_support

        return create_analyzer_with_national_id_support(countries=["USA", "GB"])

    def test_detects_ids(self, analyzer):
        results = analyzer.analyze(
            "SSN 123-45-6789, NI number AB123456C",
            language="en",
            entities=["USA_NATIONAL_ID", "GBR_NATIONAL_ID"],
        )
        assert {r.entity_type for r in results} == {"USA_NATIONAL_ID", "GBR_NATIONAL_ID"}

    def test_alias_config(self, write_yaml):
        pytest.importorskip("en_core_web_sm")
        from national_ids.recognizers.registry import create_analyzer_with_national_id_support

        path = write_yaml("aliases:\n  - alias: BRIT\n    country_code: GBR\n")
        analyzer = create_analyzer_with_national_id_support(
            countries=["BRIT"], alias_config_path=path
        )
        assert "GBR_NATIONAL_ID" in analyzer.get_supported_entities()
