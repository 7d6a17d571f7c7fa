"""Translation loading interface and implementations.

Defines the contract for loading translation tables and provides the JSON
loader that reads the bundled table and on-disk translation files.
"""

import json
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Dict, List

from infrastructure.i18n.exceptions import MalformedTranslationData, ResourceUnavailable
from infrastructure.i18n.models import BASELINE_LOCALE, BUNDLED_LOCALE, TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()

BUNDLED_PACKAGE = "infrastructure.i18n.locales"


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define where translation data comes from and which
    locales they can offer.
    """

    baseline_locale: str = BASELINE_LOCALE

    @abstractmethod
    def load(self, locale: str) -> TranslationTable:
        """Load the translation table for a locale.

        Args:
            locale: Locale code to load.

        Returns:
            TranslationTable with loaded messages.

        Raises:
            ResourceUnavailable: If the translation source is missing or unreadable.
            MalformedTranslationData: If the data does not decode to a non-empty table.
        """

    @abstractmethod
    def list_locales(self) -> List[str]:
        """List loadable locale codes in preference order.

        Returns:
            Locale codes, recomputed on every call.
        """


def parse_table(locale: str, data: bytes) -> TranslationTable:
    """Decode UTF-8 JSON bytes into a translation table.

    Args:
        locale: Locale code the data belongs to (for errors and the table).
        data: Raw bytes holding a flat JSON object of string pairs.

    Returns:
        Non-empty TranslationTable.

    Raises:
        MalformedTranslationData: If decoding fails, a value is neither a
            string nor null, or the result is empty.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedTranslationData(locale, f"invalid UTF-8: {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedTranslationData(locale, f"invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedTranslationData(
            locale, f"expected a JSON object, got {type(payload).__name__}"
        )

    messages: Dict[str, str] = {}
    for key, value in payload.items():
        if value is None:
            # null leaves the key untranslated
            logger.warning("null_translation_skipped", locale=locale, key=key)
            continue
        if not isinstance(value, str):
            raise MalformedTranslationData(
                locale, f"value for {key!r} is {type(value).__name__}, expected string"
            )
        messages[key] = value

    if not messages:
        raise MalformedTranslationData(locale, "translation table is empty")

    return TranslationTable.from_messages(locale, messages)


class JSONTranslationLoader(TranslationLoader):
    """Loader for flat JSON translation tables.

    The bundled locale is read from package data, the baseline locale needs
    no data at all, and every other locale is read from a file named exactly
    after the locale code inside translations_dir.

    Attributes:
        translations_dir: Directory holding on-disk translation files.
        bundled_locale: Locale compiled into the package.
        baseline_locale: Locale rendered with the identity table.
    """

    def __init__(
        self,
        translations_dir: Path,
        bundled_locale: str = BUNDLED_LOCALE,
        baseline_locale: str = BASELINE_LOCALE,
        bundled_package: str = BUNDLED_PACKAGE,
    ):
        """Initialize JSON translation loader.

        The translations directory does not need to exist; it is only
        consulted when listing or loading on-disk locales.

        Args:
            translations_dir: Path to directory with translation files.
            bundled_locale: Locale whose table ships as package data.
            baseline_locale: Locale that needs no table.
            bundled_package: Package holding the bundled <locale>.json resource.
        """
        self.translations_dir = Path(translations_dir)
        self.bundled_locale = bundled_locale
        self.baseline_locale = baseline_locale
        self.bundled_package = bundled_package

        logger.info(
            "initialized_json_loader",
            translations_dir=str(self.translations_dir),
            bundled_locale=bundled_locale,
            baseline_locale=baseline_locale,
        )

    def load(self, locale: str) -> TranslationTable:
        """Load translations for a locale.

        Args:
            locale: Locale to load.

        Returns:
            TranslationTable; empty (identity) for the baseline locale.

        Raises:
            ResourceUnavailable: If the file or bundled resource cannot be read.
            MalformedTranslationData: If the data is not a non-empty flat object.
        """
        if locale == self.baseline_locale:
            return TranslationTable.identity(locale)

        if locale == self.bundled_locale:
            data = self._read_bundled(locale)
        else:
            data = self._read_file(locale)

        table = parse_table(locale, data)
        logger.info("loaded_translations", locale=locale, message_count=len(table))
        return table

    def list_locales(self) -> List[str]:
        """List the bundled locale, the baseline and every on-disk file.

        File names are taken as locale codes without validation; malformed
        names fail later when loaded.

        Returns:
            Locale codes: bundled, baseline, then directory entries sorted by name.
        """
        locales = [self.bundled_locale, self.baseline_locale]

        if not self.translations_dir.is_dir():
            return locales

        try:
            entries = sorted(p.name for p in self.translations_dir.iterdir() if p.is_file())
        except OSError as e:
            logger.warning(
                "translations_dir_unreadable",
                translations_dir=str(self.translations_dir),
                error=str(e),
            )
            return locales

        locales.extend(entries)
        return locales

    def _read_bundled(self, locale: str) -> bytes:
        resource = resources.files(self.bundled_package).joinpath(f"{locale}.json")
        try:
            return resource.read_bytes()
        except OSError as e:
            raise ResourceUnavailable(
                locale, path=f"{self.bundled_package}/{locale}.json", reason=str(e)
            ) from e

    def _read_file(self, locale: str) -> bytes:
        path = self.translations_dir / locale
        try:
            return path.read_bytes()
        except OSError as e:
            raise ResourceUnavailable(locale, path=str(path), reason=e.strerror or str(e)) from e
