"""Translation service for dependency injection.

Provides a class-based interface to the i18n system and composes the
translation store with the UI tree walker.
"""

from typing import Any, List, Optional

from infrastructure.i18n.factory import create_translation_store
from infrastructure.i18n.translator import TranslationStore
from infrastructure.logging import get_module_logger
from infrastructure.ui import NodeAdapter, iter_tree
from infrastructure.ui.nodes import DEFAULT_ADAPTER

logger = get_module_logger()


class TranslationService:
    """Class-based translation service.

    Wraps a TranslationStore and adds tree translation on top of it.

    Usage:
        service = TranslationService()
        service.load("zh-CN")
        title = service.translate("Settings")
        service.apply_translations(main_form)
    """

    def __init__(self, store: Optional[TranslationStore] = None):
        """Initialize translation service.

        Args:
            store: Optional pre-configured TranslationStore.
                   If not provided, creates default via factory.
        """
        self._store = store or create_translation_store()

    @property
    def store(self) -> TranslationStore:
        """Access underlying TranslationStore instance."""
        return self._store

    @property
    def active_locale(self) -> str:
        return self._store.active_locale

    def load(self, requested: str) -> None:
        """Switch language; failures are logged and keep the current one."""
        self._store.load(requested)

    def available_locales(self) -> List[str]:
        return self._store.list_available()

    def translate(self, *tokens: Any) -> str:
        return self._store.translate(*tokens)

    def translate_format(self, format_string: str, *args: Any) -> str:
        return self._store.translate_format(format_string, *args)

    def apply_translations(self, root: Any, adapter: Optional[NodeAdapter] = None) -> int:
        """Translate the display text of every node in a UI tree.

        Text inputs and selection lists are skipped: their text is user
        data. Nodes without a text field are left alone.

        Args:
            root: Root of the tree, typically a form or window.
            adapter: Adapter for the tree representation (default: attribute access).

        Returns:
            Number of nodes whose text changed.
        """
        adapter = adapter or DEFAULT_ADAPTER
        visited = 0
        changed = 0

        for node, capabilities in iter_tree(root, adapter):
            visited += 1
            if not capabilities.is_translatable:
                continue

            text = adapter.get_text(node)
            translated = self._store.translate(text)
            if translated != text:
                adapter.set_text(node, translated)
                changed += 1

        logger.debug(
            "applied_tree_translations",
            locale=self._store.active_locale,
            visited=visited,
            changed=changed,
        )
        return changed
