"""Structlog processors specific to the localization engine.

Usage:
    from infrastructure.logging.formatters import add_app_info, truncate_translation_keys
"""

from typing import Any, Callable, Dict, Iterable

APP_NAME = "ui-i18n"

# Event fields that carry caller UI text
TRANSLATION_TEXT_FIELDS = ("key", "text")

Processor = Callable[[Any, str, Dict[str, Any]], Dict[str, Any]]


def add_app_info(app_name: str = APP_NAME, app_version: str = "unknown") -> Processor:
    """Create a processor that tags log entries with the application.

    Values already bound on the event win, so embedding applications can
    tag their own entries.

    Args:
        app_name: Name reported in the "app" field.
        app_version: Version reported in the "app_version" field.

    Returns:
        A structlog processor function.
    """

    def processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def truncate_translation_keys(
    max_length: int = 120, fields: Iterable[str] = TRANSLATION_TEXT_FIELDS
) -> Processor:
    """Create a processor that shortens long UI text in log entries.

    Translation keys are whole UI strings, sometimes paragraphs. Only the
    named fields are shortened; other values are left alone.

    Args:
        max_length: Maximum kept length of each field.
        fields: Event fields holding translation keys or UI text.

    Returns:
        A structlog processor function.
    """
    fields = tuple(fields)

    def processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        for field in fields:
            value = event_dict.get(field)
            if isinstance(value, str) and len(value) > max_length:
                event_dict[field] = f"{value[:max_length]}...[{len(value)} chars]"
        return event_dict

    return processor
