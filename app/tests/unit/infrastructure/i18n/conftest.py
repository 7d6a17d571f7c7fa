"""Feature-level fixtures for i18n system tests.

Provides translation directories, loaders and stores with a fixed host
culture so that results do not depend on the machine running the tests.
"""

import pytest

from infrastructure.i18n import JSONTranslationLoader, LocaleResolver, TranslationStore
from tests.factories.i18n import write_translation_file


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary translations directory with sample locale files.

    Returns a directory structure like:
    - fr-FR
    - ja-JP
    """
    translations_dir = tmp_path / "i18n"
    write_translation_file(
        translations_dir,
        "fr-FR",
        {
            "Hello": "Bonjour",
            "Settings": "Paramètres",
            "Start": "Démarrer",
            "Server": "Serveur",
            "{0} item(s)": "{0} élément(s)",
        },
    )
    write_translation_file(
        translations_dir,
        "ja-JP",
        {
            "Hello": "こんにちは",
            "Settings": "設定",
        },
    )
    return translations_dir


@pytest.fixture
def json_loader(temp_translations_dir):
    """Create JSONTranslationLoader for the temporary translations directory."""
    return JSONTranslationLoader(temp_translations_dir)


@pytest.fixture
def host_culture_code():
    """Culture reported by the fake host; tests may override this fixture."""
    return "fr-FR"


@pytest.fixture
def resolver(host_culture_code):
    """LocaleResolver with a fixed host culture."""
    return LocaleResolver(culture_provider=lambda: host_culture_code)


@pytest.fixture
def store(json_loader, resolver):
    """TranslationStore on the baseline locale, nothing loaded yet."""
    return TranslationStore(json_loader, resolver=resolver)
