"""Locale resolution logic for choosing the active translation set.

Resolves the "System" sentinel to the host UI culture and maps requested
codes onto the locales that can actually be loaded.
"""

import locale as host_locale
import os
from typing import Callable, Optional, Sequence

from infrastructure.i18n.models import BASELINE_LOCALE, SYSTEM_LOCALE, language_of
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Environment variables consulted, in order, when the process locale is unset
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

# Culture used when the host reports none; it has no language family
INVARIANT_CULTURE = ""


def normalize_culture(name: Optional[str]) -> Optional[str]:
    """Convert a POSIX locale name into a culture code.

    "zh_CN.UTF-8" becomes "zh-CN". The portable "C" and "POSIX" locales carry
    no culture and yield None.

    Args:
        name: Locale name as reported by the host.

    Returns:
        Culture code, or None if name holds no culture.
    """
    if not name:
        return None
    name = name.split(".", 1)[0].split("@", 1)[0].strip()
    if not name or name in ("C", "POSIX"):
        return None
    return name.replace("_", "-")


def host_culture() -> Optional[str]:
    """Read the host's current UI culture code.

    Returns:
        Culture code such as "fr-FR", or None if the host reports none.
    """
    try:
        name = host_locale.getlocale()[0]
    except ValueError:
        name = None

    culture = normalize_culture(name)
    if culture:
        return culture

    for var in LOCALE_ENV_VARS:
        culture = normalize_culture(os.environ.get(var))
        if culture:
            return culture
    return None


class LocaleResolver:
    """Resolves a requested locale code against the available locales.

    Fallback chain:
    1. "System" is replaced by the host UI culture (or "" if unknown)
    2. Exact match in the available locales
    3. First available locale of the same language family
    4. Default (baseline) locale
    """

    def __init__(
        self,
        default_locale: str = BASELINE_LOCALE,
        culture_provider: Optional[Callable[[], Optional[str]]] = None,
    ):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when nothing matches.
            culture_provider: Callable returning the host culture code.
                Defaults to reading the process locale settings.
        """
        self.default_locale = default_locale
        self.culture_provider = culture_provider or host_culture
        self.log = logger.bind(default_locale=default_locale)

    def system_locale(self) -> str:
        """Get the host UI culture.

        Returns:
            Culture code, or the invariant culture "" if the host reports
            none. The invariant culture matches the first available code
            without a region, else the default locale.
        """
        culture = self.culture_provider()
        if not culture:
            self.log.info("system_culture_unknown")
            return INVARIANT_CULTURE
        return culture

    def resolve(self, requested: str, available: Sequence[str]) -> str:
        """Pick the locale to activate for a requested code.

        Args:
            requested: Requested locale code, or "System".
            available: Loadable locale codes in preference order, without
                the "System" sentinel.

        Returns:
            A member of available, or the default locale.
        """
        code = self.system_locale() if requested == SYSTEM_LOCALE else requested

        if code in available:
            return code

        language = language_of(code)
        resolved = next(
            (candidate for candidate in available if language_of(candidate) == language),
            self.default_locale,
        )
        self.log.info("locale_not_found_using_fallback", requested=code, resolved=resolved)
        return resolved
