"""Unit tests for the country code alias loader."""

from pathlib import Path

import pytest

from national_ids.config.alias_loader import (
    AliasConfig,
    load_aliases_from_yaml,
    load_aliases_from_yaml_safe,
)


class TestAliasConfig:
    """Tests for AliasConfig dataclass."""

    def test_valid_config(self):
        config = AliasConfig(alias="kosovo", country_code=" srb ")
        assert config.alias == "KOSOVO"
        assert config.country_code == "SRB"

    def test_invalid_empty_alias(self):
        """Test that empty alias raises ValueError."""
        with pytest.raises(ValueError, match="Alias cannot be empty"):
            AliasConfig(alias="  ", country_code="SRB")

    def test_invalid_empty_country_code(self):
        with pytest.raises(ValueError, match="Country code cannot be empty"):
            AliasConfig(alias="KOSOVO", country_code="")

    def test_invalid_non_string(self):
        """YAML booleans such as an unquoted NO are rejected."""
        with pytest.raises(ValueError, match="Alias cannot be empty"):
            AliasConfig(alias=False, country_code="NOR")

    def test_invalid_characters(self):
        with pytest.raises(ValueError, match="alphanumeric"):
            AliasConfig(alias="GB-ENG", country_code="GBR")


class TestLoadAliasesFromYaml:
    """Tests for loading aliases from YAML files."""

    def test_load_valid_yaml(self, write_yaml):
        path = write_yaml(
            """
aliases:
  - alias: kosovo
    country_code: SRB
  - alias: "NO"
    country_code: nor
"""
        )
        aliases = load_aliases_from_yaml(path)
        assert len(aliases) == 2

        assert aliases[0].alias == "KOSOVO"
        assert aliases[0].country_code == "SRB"

        assert aliases[1].alias == "NO"
        assert aliases[1].country_code == "NOR"

    def test_accepts_string_path(self, write_yaml):
        path = write_yaml("aliases:\n  - alias: HELVETIA\n    country_code: CHE\n")
        assert load_aliases_from_yaml(str(path))[0].country_code == "CHE"

    def test_load_empty_yaml(self, write_yaml):
        """Test loading an empty YAML file returns empty list."""
        assert load_aliases_from_yaml(write_yaml("")) == []

    def test_load_yaml_no_aliases(self, write_yaml):
        assert load_aliases_from_yaml(write_yaml("aliases: []")) == []

    def test_load_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            load_aliases_from_yaml(Path("/nonexistent/file.yaml"))

    def test_load_invalid_yaml_structure(self, write_yaml):
        """Test loading invalid YAML structure raises ValueError."""
        with pytest.raises(ValueError, match="expected dict"):
            load_aliases_from_yaml(write_yaml("- just a list"))

    def test_load_invalid_aliases_structure(self, write_yaml):
        with pytest.raises(ValueError, match="expected list"):
            load_aliases_from_yaml(write_yaml("aliases: GBR"))

    def test_load_entry_not_dict(self, write_yaml):
        with pytest.raises(ValueError, match="is not a dict"):
            load_aliases_from_yaml(write_yaml("aliases:\n  - GBR\n"))

    def test_load_missing_required_field(self, write_yaml):
        path = write_yaml(
            """
aliases:
  - alias: KOSOVO
    # missing country_code
"""
        )
        with pytest.raises(ValueError, match="missing required field: country_code"):
            load_aliases_from_yaml(path)


class TestLoadAliasesFromYamlSafe:
    """Tests for safe loading with error handling."""

    def test_safe_load_success(self, write_yaml):
        aliases, error = load_aliases_from_yaml_safe(
            write_yaml("aliases:\n  - alias: KOSOVO\n    country_code: SRB\n")
        )
        assert error is None
        assert len(aliases) == 1

    def test_safe_load_file_not_found(self):
        aliases, error = load_aliases_from_yaml_safe(Path("/nonexistent/file.yaml"))
        assert aliases == []
        assert "not found" in error

    def test_safe_load_invalid_config(self, write_yaml):
        aliases, error = load_aliases_from_yaml_safe(write_yaml("- just a list"))
        assert aliases == []
        assert "Configuration error" in error

    def test_safe_load_malformed_yaml(self, write_yaml):
        aliases, error = load_aliases_from_yaml_safe(write_yaml("aliases: [unclosed"))
        assert aliases == []
        assert "YAML parsing error" in error
