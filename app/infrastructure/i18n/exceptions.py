"""Custom exceptions for the i18n system.

Raised by translation loaders. TranslationStore absorbs them at its load
boundary and logs them; they never reach translate callers.
"""

from typing import Optional


class TranslationError(Exception):
    """Base exception for all translation loading errors.

    Example:
        try:
            loader.load("fr-FR")
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    def __init__(self, message: str, locale: Optional[str] = None):
        super().__init__(message)
        self.locale = locale


class ResourceUnavailable(TranslationError):
    """Raised when a translation file or resource is missing or unreadable.

    Example:
        >>> loader.load("de-DE")
        Traceback (most recent call last):
        ...
        ResourceUnavailable: Translation resource for de-DE not available: i18n/de-DE
    """

    def __init__(self, locale: str, path: Optional[str] = None, reason: str = ""):
        message = f"Translation resource for {locale} not available"
        if path:
            message = f"{message}: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, locale=locale)
        self.path = path


class MalformedTranslationData(TranslationError):
    """Raised when translation data cannot be decoded into a non-empty table.

    Covers invalid UTF-8, invalid JSON, a payload that is not a flat object of
    strings, and an empty object.
    """

    def __init__(self, locale: str, reason: str):
        super().__init__(f"Malformed translation data for {locale}: {reason}", locale=locale)
        self.reason = reason
