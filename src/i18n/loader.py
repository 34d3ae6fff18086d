"""
src/i18n/loader.py
──────────────────
Builds a translation table from a directory of JSON locale files.

    locales/
        en.json   → table["en"]
        es.json   → table["es"]

The default language is placed first so the registry's path map is generated
from its table; the rest follow alphabetically.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


def load_locale(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Locale file {path} must contain a JSON object")
    return data


def load_translations(directory: Path, default_lang: str | None = None) -> dict[str, dict[str, Any]]:
    """
    Load every ``<lang>.json`` file in `directory`.

    Args:
        directory: Folder holding the locale files
        default_lang: Language to order first, if present

    Returns:
        Table keyed by language (file stem). Empty if no files were found.
    """
    files = sorted(Path(directory).glob("*.json"), key=lambda p: (p.stem != default_lang, p.stem))
    table: dict[str, dict[str, Any]] = {}
    for path in files:
        table[path.stem] = load_locale(path)
        log.debug("Loaded locale %r from %s", path.stem, path)
    if not table:
        log.warning("No locale files found in %s", directory)
    return table
