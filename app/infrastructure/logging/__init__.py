"""Structured logging infrastructure.

Centralized logging configuration for the localization engine using
structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - add_app_info(), truncate_translation_keys(): structlog processors

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.formatters import add_app_info, truncate_translation_keys
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "add_app_info",
    "truncate_translation_keys",
    "configure_logging",
    "get_module_logger",
]
