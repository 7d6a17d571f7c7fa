"""i18n system - locale selection and translation of text and UI trees.

Provides locale resolution with language-family fallback, translation table
loading and literal-passthrough translation.

Main components:
- models: TranslationTable, locale constants and language_of
- exceptions: ResourceUnavailable, MalformedTranslationData
- loader: TranslationLoader and JSONTranslationLoader
- resolvers: LocaleResolver for "System" and fallback resolution
- translator: TranslationStore with translate/translate_format
- service: TranslationService applying translations to UI trees
"""

from infrastructure.i18n.exceptions import (
    MalformedTranslationData,
    ResourceUnavailable,
    TranslationError,
)
from infrastructure.i18n.factory import create_translation_store
from infrastructure.i18n.loader import JSONTranslationLoader, TranslationLoader, parse_table
from infrastructure.i18n.models import (
    BASELINE_LOCALE,
    BUNDLED_LOCALE,
    SYSTEM_LOCALE,
    TranslationTable,
    language_of,
)
from infrastructure.i18n.resolvers import LocaleResolver, host_culture, normalize_culture
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import TranslationStore

__all__ = [
    "BASELINE_LOCALE",
    "BUNDLED_LOCALE",
    "SYSTEM_LOCALE",
    "TranslationTable",
    "language_of",
    "TranslationError",
    "ResourceUnavailable",
    "MalformedTranslationData",
    "TranslationLoader",
    "JSONTranslationLoader",
    "parse_table",
    "LocaleResolver",
    "host_culture",
    "normalize_culture",
    "TranslationStore",
    "TranslationService",
    "create_translation_store",
]
