"""Configuration module for national-ids."""

from national_ids.config.alias_loader import (
    AliasConfig,
    load_aliases_from_yaml,
    load_aliases_from_yaml_safe,
)

__all__ = [
    "AliasConfig",
    "load_aliases_from_yaml",
    "load_aliases_from_yaml_safe",
]
