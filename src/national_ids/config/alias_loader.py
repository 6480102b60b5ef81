"""YAML configuration loader for extra country-code aliases.

Lets deployments accept their own spellings of country codes (legacy
identifiers, internal codes) without modifying the built-in alias table.

Example YAML configuration:

    aliases:
      - alias: GB
        country_code: GBR
      - alias: KOSOVO
        country_code: SRB

Quote codes that YAML reads as booleans, such as "NO" or "ON".
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class AliasConfig:
    """A single alias mapping.

    Attributes:
        alias: Code accepted from callers (case-insensitive).
        country_code: Canonical alpha-3 code the alias resolves to.
    """

    alias: str
    country_code: str

    def __post_init__(self) -> None:
        if not isinstance(self.alias, str) or not self.alias.strip():
            raise ValueError("Alias cannot be empty")
        if not isinstance(self.country_code, str) or not self.country_code.strip():
            raise ValueError("Country code cannot be empty")
        self.alias = self.alias.strip().upper()
        self.country_code = self.country_code.strip().upper()
        if not self.alias.isalnum():
            raise ValueError(f"Alias must be alphanumeric, got {self.alias!r}")
        if not self.country_code.isalnum():
            raise ValueError(f"Country code must be alphanumeric, got {self.country_code!r}")


def load_aliases_from_yaml(path: Path | str) -> list[AliasConfig]:
    """Load alias configurations from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        List of AliasConfig objects.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return []

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    aliases_data = data.get("aliases", [])

    if not isinstance(aliases_data, list):
        raise ValueError(
            f"Invalid aliases structure: expected list, got {type(aliases_data).__name__}"
        )

    aliases = []
    for i, entry in enumerate(aliases_data):
        if not isinstance(entry, dict):
            raise ValueError(f"Alias {i} is not a dict: {type(entry).__name__}")

        if "alias" not in entry:
            raise ValueError(f"Alias {i} missing required field: alias")
        if "country_code" not in entry:
            raise ValueError(f"Alias {i} missing required field: country_code")

        aliases.append(AliasConfig(alias=entry["alias"], country_code=entry["country_code"]))

    return aliases


def load_aliases_from_yaml_safe(path: Path | str) -> tuple[list[AliasConfig], Optional[str]]:
    """Load aliases, returning an error message instead of raising.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Tuple of (aliases, error_message). If successful, error_message is None.
        If failed, aliases is an empty list.

    Example:
        >>> aliases, error = load_aliases_from_yaml_safe("config/aliases.yaml")
        >>> if error:
        ...     print(f"Warning: {error}")
    """
    try:
        aliases = load_aliases_from_yaml(path)
        return aliases, None
    except FileNotFoundError as e:
        return [], str(e)
    except ValueError as e:
        return [], f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return [], f"YAML parsing error: {e}"
    except OSError as e:
        return [], f"Unexpected error loading aliases: {e}"
