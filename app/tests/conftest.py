"""Shared pytest configuration.

The application package root (app/) is put on sys.path through the pytest
``pythonpath`` setting in pyproject.toml.
"""

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def app_settings(tmp_path, monkeypatch):
    """Settings instance isolated from the developer's environment."""
    for var in (
        "PREFIX",
        "LOG_LEVEL",
        "I18N_TRANSLATIONS_DIR",
        "I18N_LANGUAGE",
        "I18N_BASELINE_LOCALE",
        "I18N_BUNDLED_LOCALE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return Settings()
