"""
src/i18n/errors.py
──────────────────
Exceptions raised by the translations registry.
"""

from __future__ import annotations


class TranslationsError(Exception):
    """Base class for all translations registry errors."""


class NotRegisteredError(TranslationsError):
    def __init__(self) -> None:
        super().__init__("You must add_translations before you can use_translations")


class AlreadyRegisteredError(TranslationsError):
    def __init__(self) -> None:
        super().__init__("Translations are already registered for this process")


class NoLanguagesProvidedError(TranslationsError):
    def __init__(self) -> None:
        super().__init__("No language keys found. Map must be {lang: {...}}")


class UnknownLanguageError(TranslationsError):
    def __init__(self, language: str, available: list[str]) -> None:
        self.language = language
        self.available = available
        super().__init__(
            f"Language {language!r} doesn't exist in the lookup map "
            f"(available: {', '.join(available) or 'none'})"
        )
