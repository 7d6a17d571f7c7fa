"""Translation store holding the active locale and its translation table.

Core component for i18n: selects a locale, loads its table through a
TranslationLoader and translates text with literal passthrough for unknown
keys.
"""

import string
from typing import Any, Iterable, List, Optional, Tuple

from infrastructure.i18n.exceptions import MalformedTranslationData, ResourceUnavailable
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import SYSTEM_LOCALE, TranslationTable
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class PositionalFormatter(string.Formatter):
    """Formatter limited to positional {N} fields.

    Attribute and item access, automatic numbering, conversions and format
    specs are rejected with ValueError, so translated text can only place
    arguments, never inspect them. Escaped braces ({{ and }}) still work.
    """

    def parse(
        self, format_string: str
    ) -> Iterable[Tuple[str, Optional[str], Optional[str], Optional[str]]]:
        for literal, field_name, format_spec, conversion in super().parse(format_string):
            if field_name is not None:
                if not (field_name.isascii() and field_name.isdigit()):
                    raise ValueError(
                        f"only positional fields are allowed, got {{{field_name}}}"
                    )
                if conversion or format_spec:
                    raise ValueError(
                        f"conversions and format specs are not allowed in {{{field_name}}}"
                    )
            yield literal, field_name, format_spec, conversion


FORMATTER = PositionalFormatter()


class TranslationStore:
    """Owns the active locale and the table used to translate text.

    Not thread-safe: callers sharing a store across threads must serialize
    access themselves.

    Attributes:
        loader: TranslationLoader used to enumerate and load locales.
        resolver: LocaleResolver mapping requested codes to loadable ones.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize TranslationStore with the identity table of the baseline.

        Args:
            loader: TranslationLoader instance for loading translations.
            resolver: Optional LocaleResolver. Defaults to one falling back
                to the loader's baseline locale.
        """
        self.loader = loader
        self.resolver = resolver or LocaleResolver(default_locale=loader.baseline_locale)
        self._active_locale = loader.baseline_locale
        self._table = TranslationTable.identity(loader.baseline_locale)
        logger.info("initialized_translation_store", active_locale=self._active_locale)

    @property
    def active_locale(self) -> str:
        """Locale code of the table currently in use."""
        return self._active_locale

    @property
    def table(self) -> TranslationTable:
        """Translation table currently in use."""
        return self._table

    def list_available(self) -> List[str]:
        """List selectable locale codes.

        Returns:
            "System" followed by every locale the loader offers, recomputed
            on each call.
        """
        return [SYSTEM_LOCALE, *self.loader.list_locales()]

    def load(self, requested: str) -> None:
        """Switch to the best available locale for a requested code.

        Load failures are logged and leave the active locale and table
        untouched, so text keeps rendering in the previous language.

        Args:
            requested: Locale code, or "System" for the host UI culture.
        """
        available = self.list_available()[1:]
        locale = self.resolver.resolve(requested, available)

        try:
            table = self.loader.load(locale)
        except ResourceUnavailable as e:
            logger.error(
                "translation_resource_unavailable",
                locale=locale,
                path=e.path,
                error=str(e),
                active_locale=self._active_locale,
            )
            return
        except MalformedTranslationData as e:
            logger.error(
                "malformed_translation_data",
                locale=locale,
                reason=e.reason,
                active_locale=self._active_locale,
            )
            return

        self._table = table
        self._active_locale = locale
        logger.info(
            "loaded_locale_translations",
            requested=requested,
            locale=locale,
            message_count=len(table),
        )

    def has_key(self, key: str) -> bool:
        """Check if the active table translates key."""
        return self._table.has_message(key)

    def translate(self, *tokens: Any) -> str:
        """Translate and concatenate tokens.

        String tokens are looked up in the active table and pass through
        unchanged when no translation exists. Other tokens are rendered with
        str(); None renders as an empty string.

        Args:
            *tokens: Strings to translate, interleaved with literal values.

        Returns:
            Concatenated text.

        Example:
            store.translate("Delay", ": ", 42, "ms")
        """
        parts = []
        for token in tokens:
            if isinstance(token, str):
                parts.append(self._table.get_message(token, token))
            elif token is not None:
                parts.append(str(token))
        return "".join(parts)

    def translate_format(self, format_string: str, *args: Any) -> str:
        """Translate a format string and its string arguments, then format.

        Each string argument is translated on its own before positional
        substitution into the translated format string. None arguments render
        as empty strings. When the translated format is unusable, the failure
        is logged and the untranslated format is used instead.

        Args:
            format_string: Format with positional placeholders ({0}, {1}, ...).
            *args: Values substituted into the placeholders.

        Returns:
            Formatted, translated text.

        Raises:
            ValueError: If format_string itself is not a positional format.
            IndexError: If format_string references more arguments than given.
        """
        translated_args = [
            "" if arg is None else self.translate(arg) if isinstance(arg, str) else arg
            for arg in args
        ]
        translated_format = self.translate(format_string)

        try:
            return FORMATTER.vformat(translated_format, translated_args, {})
        except (ValueError, IndexError, KeyError) as e:
            if translated_format == format_string:
                raise
            logger.warning(
                "translation_format_failed",
                locale=self._active_locale,
                key=format_string,
                error=str(e),
            )

        return FORMATTER.vformat(format_string, translated_args, {})
