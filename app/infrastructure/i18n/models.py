"""Translation models for i18n system.

Defines locale constants and the translation table data structure.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

# Sentinel meaning "follow the host UI culture"
SYSTEM_LOCALE = "System"

# Locale rendered as-is, without a table
BASELINE_LOCALE = "en-US"

# Locale whose table ships inside the package
BUNDLED_LOCALE = "zh-CN"

LANGUAGE_SEPARATOR = "-"


def language_of(locale_code: str) -> str:
    """Get language family of a locale code (e.g., "en" from "en-US").

    Codes without a separator have no language family and yield an empty
    string, so two such codes are considered the same family.

    Args:
        locale_code: Locale code such as "zh-CN".

    Returns:
        Substring before the first separator, or "" if there is none.
    """
    if LANGUAGE_SEPARATOR not in locale_code:
        return ""
    return locale_code.split(LANGUAGE_SEPARATOR, 1)[0]


@dataclass(frozen=True)
class TranslationTable:
    """Key to text mapping for a single locale.

    An empty table is the identity translation: every key renders as itself.
    Frozen so that a table can only be replaced as a whole, never patched.

    Attributes:
        locale: Locale code this table was loaded for.
        messages: Flat mapping of source text to translated text.
        loaded_at: Timestamp (ISO 8601) when the table was loaded.
    """

    locale: str
    messages: Dict[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    @classmethod
    def identity(cls, locale: str = BASELINE_LOCALE) -> "TranslationTable":
        """Create an empty table that translates every key to itself."""
        return cls(locale=locale, loaded_at=_now())

    @classmethod
    def from_messages(cls, locale: str, messages: Dict[str, str]) -> "TranslationTable":
        """Create a table stamped with the current time."""
        return cls(locale=locale, messages=dict(messages), loaded_at=_now())

    def get_message(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Retrieve a translated message by key.

        Args:
            key: Source text.
            default: Value returned when key is not in the table.

        Returns:
            Translated text, or default if not found.
        """
        return self.messages.get(key, default)

    def has_message(self, key: str) -> bool:
        """Check if a translation exists for key."""
        return key in self.messages

    @property
    def is_identity(self) -> bool:
        return not self.messages

    def __len__(self) -> int:
        return len(self.messages)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
