"""
src/i18n/registry.py
────────────────────
Process-wide translations registry.

Usage:
    from src.i18n.registry import add_translations, use_translations

    add_translations("en", {"en": {"greet": "Hello {0}"}, "es": {"greet": "Hola {0}"}})

    i18n = use_translations()
    label = i18n.t("greet", "Sam")      # str(label) → "Hello Sam"
    i18n.change_language("es")          # str(label) → "Hola Sam"

Lifecycle: Unregistered → add_translations() → Registered(default language).
change_language() moves between registered languages; there is no way back
to Unregistered except reset_translations(), which exists for tests and
reloads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.i18n.cache import StateCache
from src.i18n.errors import (
    AlreadyRegisteredError,
    NoLanguagesProvidedError,
    NotRegisteredError,
)
from src.i18n.models import TranslationState
from src.i18n.path_map import generate_path_map
from src.i18n.resolver import resolve

log = logging.getLogger(__name__)


class Registry:
    """
    Translation table, active language and the cache of live states.

    States handed out by translate() keep their identity for the life of the
    process; change_language() rewrites their `value` in place.
    """

    def __init__(self, default_language: str, translations: Mapping[str, Any]) -> None:
        languages = list(translations)
        if not languages:
            raise NoLanguagesProvidedError()

        self._translations = translations
        self._language = default_language
        self._languages = languages
        self._map = generate_path_map(translations[languages[0]])
        self._cache = StateCache(self._resolve_current)

    # ── Read-only surface ─────────────────────────────────────────────────────

    @property
    def language(self) -> str:
        return self._language

    @property
    def languages(self) -> list[str]:
        return list(self._languages)

    @property
    def translations(self) -> dict[str, Any]:
        """Path map of the first registered language."""
        return self._map

    @property
    def cache(self) -> StateCache:
        return self._cache

    # ── Lookups ───────────────────────────────────────────────────────────────

    def _resolve_current(self, path: str, args: list[Any]) -> str:
        return resolve(self._translations, self._language, path, args)

    def translate_from_language(self, language: str, path: str, *args: Any) -> str:
        """Resolve `path` in `language` without touching the cache."""
        return resolve(self._translations, language, path, *args)

    def translate(self, path: str, *args: Any) -> TranslationState:
        """Live state for `path` in the active language."""
        return self._cache.translate(path, *args)

    def t(self, path: str, *args: Any) -> TranslationState:
        return self.translate(path, *args)

    # ── Language switch ───────────────────────────────────────────────────────

    def change_language(self, language: str) -> None:
        """
        Switch the active language and re-resolve every cached state in place.

        The active language is updated before re-resolution starts. An unknown
        language raises UnknownLanguageError from the first re-resolved state,
        after the switch; with an empty cache it is accepted silently.
        """
        if language == self._language:
            return

        log.info("Changing language %r → %r", self._language, language)
        self._language = language

        count = 0
        for state in self._cache:
            state.value = self.translate_from_language(language, state.path, state.args)
            count += 1
        log.info("Re-resolved %d cached translations", count)


# ── Lifecycle ─────────────────────────────────────────────────────────────────


class _RegistryState:
    current: Registry | None = None


_registry_state = _RegistryState()


def add_translations(default_language: str, translations: Mapping[str, Any]) -> Registry:
    """
    Create the process-wide registry.

    Raises:
        NoLanguagesProvidedError: if `translations` has no language keys.
        AlreadyRegisteredError: if a registry already exists.
    """
    if _registry_state.current is not None:
        raise AlreadyRegisteredError()
    registry = Registry(default_language, translations)
    _registry_state.current = registry
    log.info(
        "Registered translations: languages=%s default=%r",
        registry.languages,
        default_language,
    )
    return registry


def use_translations() -> Registry:
    """Return the registry created by add_translations()."""
    if _registry_state.current is None:
        raise NotRegisteredError()
    return _registry_state.current


def reset_translations() -> None:
    _registry_state.current = None
