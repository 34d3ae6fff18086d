"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the translations test suite.
"""
import os

import pytest

os.environ.setdefault("DEFAULT_LANG", "en")


@pytest.fixture(autouse=True)
def fresh_registry():
    """Every test starts (and ends) with no registered translations."""
    from src.i18n.registry import reset_translations
    reset_translations()
    yield
    reset_translations()


@pytest.fixture
def table() -> dict:
    return {
        "en": {
            "greet": "Hello {0}",
            "menu": {
                "file": {"open": "Open {0}", "close": "Close"},
                "edit": "Edit",
            },
            "pair": "{0} and {1}",
            "twice": "{0} {0}",
        },
        "fr": {
            "greet": "Bonjour {0}",
            "menu": {
                "file": {"open": "Ouvrir {0}", "close": "Fermer"},
                "edit": "Modifier",
            },
            "pair": "{0} et {1}",
            "twice": "{0} {0}",
        },
    }


@pytest.fixture
def registry(table):
    from src.i18n.registry import add_translations
    return add_translations("en", table)
