"""Factory functions for creating i18n components.

Provides convenience functions for initializing a translation store from the
application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.configuration import settings as app_settings
from infrastructure.i18n.loader import JSONTranslationLoader
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import TranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_translation_store(
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    load: bool = True,
) -> TranslationStore:
    """Create and configure a TranslationStore instance.

    Args:
        settings: Settings to read i18n configuration from (default: app settings)
        translations_dir: Override for the on-disk translations directory
        load: Whether to load the configured language immediately (default: True)

    Returns:
        TranslationStore: Configured store

    Usage:
        # Use defaults (./i18n, language from I18N_LANGUAGE)
        store = create_translation_store()

        # Lazy loading
        store = create_translation_store(load=False)
        store.load("fr-FR")
    """
    i18n = (settings or app_settings).i18n

    if translations_dir is None:
        translations_dir = Path(i18n.translations_dir)

    loader = JSONTranslationLoader(
        translations_dir=translations_dir,
        bundled_locale=i18n.bundled_locale,
        baseline_locale=i18n.baseline_locale,
    )
    store = TranslationStore(
        loader=loader,
        resolver=LocaleResolver(default_locale=i18n.baseline_locale),
    )

    if load:
        store.load(i18n.language)
        logger.info(
            "translation_store_created_with_load",
            translations_dir=str(translations_dir),
            language=i18n.language,
            active_locale=store.active_locale,
        )
    else:
        logger.info(
            "translation_store_created_lazy",
            translations_dir=str(translations_dir),
        )

    return store
