"""
Recognizer Registry

Sets up a Presidio AnalyzerEngine with the national ID recognizers
registered next to Presidio's predefined ones.
"""

import warnings
from pathlib import Path
from typing import Optional, Union

from presidio_analyzer import AnalyzerEngine, RecognizerRegistry
from presidio_analyzer.nlp_engine import NlpEngineProvider

from national_ids.core.registry import COUNTRIES
from national_ids.recognizers.national_id import create_national_id_recognizers, entity_for


def create_analyzer_with_national_id_support(
    language: str = "en",
    spacy_model: str = "en_core_web_sm",
    countries: Optional[list[str]] = None,
    custom_recognizers: Optional[list] = None,
    alias_config_path: Optional[Union[Path, str]] = None,
) -> AnalyzerEngine:
    """Create an AnalyzerEngine that detects national ID numbers.

    Args:
        language: Language code (default: "en").
        spacy_model: spaCy model for the NLP engine (default: en_core_web_sm).
        countries: Country codes or aliases to detect (default: all).
        custom_recognizers: Additional recognizers to register.
        alias_config_path: YAML file with extra aliases used to resolve
            ``countries``.

    Returns:
        Configured AnalyzerEngine instance.

    Example:
        >>> analyzer = create_analyzer_with_national_id_support(countries=["CN", "GB"])
        >>> results = analyzer.analyze("NI number AB123456C", language="en")
    """
    nlp_configuration = {
        "nlp_engine_name": "spacy",
        "models": [
            {"lang_code": language, "model_name": spacy_model},
        ],
    }

    nlp_engine = NlpEngineProvider(nlp_configuration=nlp_configuration).create_engine()

    registry = RecognizerRegistry()
    registry.load_predefined_recognizers(nlp_engine=nlp_engine, languages=[language])

    if countries is not None and alias_config_path:
        from national_ids.config.alias_loader import load_aliases_from_yaml_safe
        from national_ids.core.dispatch import NationalIdValidator

        aliases, error = load_aliases_from_yaml_safe(alias_config_path)
        if error:
            warnings.warn(f"Failed to load country code aliases: {error}")
        else:
            validator = NationalIdValidator(extra_aliases=aliases)
            countries = [_resolve(validator, code) for code in countries]

    for recognizer in create_national_id_recognizers(countries, supported_language=language):
        registry.add_recognizer(recognizer)

    if custom_recognizers:
        for recognizer in custom_recognizers:
            registry.add_recognizer(recognizer)

    return AnalyzerEngine(nlp_engine=nlp_engine, registry=registry)


def _resolve(validator, code: str) -> str:
    handler = validator.resolve(code)
    if handler is None:
        raise ValueError(f"Unsupported country code: {code}")
    return handler.code


def get_supported_entities() -> list[str]:
    """Get the entity names of every national ID recognizer.

    Returns:
        List of entity type strings, in catalog order.
    """
    return [entity_for(code) for code in COUNTRIES]
