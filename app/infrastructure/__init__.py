"""Infrastructure modules for the localization engine.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale selection, translation tables and text translation
- ui: Capability-based traversal of heterogeneous UI trees
"""

# Configuration
from infrastructure.configuration import settings

__all__ = [
    # Configuration
    "settings",
]
