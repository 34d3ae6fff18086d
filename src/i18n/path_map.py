"""
src/i18n/path_map.py
────────────────────
Builds the path map for a language table: a structure congruent to the
table where every string leaf is replaced by its own dotted key path.

    generate_path_map({"nav": {"home": "Home"}})   # → {"nav": {"home": "nav.home"}}

The map is a lookup surface for call sites (``registry.translations["nav"]["home"]``)
so paths never have to be typed by hand. The resolver never reads it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def generate_path_map(table: Mapping[str, Any], prefix: str | None = None) -> dict[str, Any]:
    """
    Mirror `table`, replacing each string leaf with its dotted path.

    Args:
        table: One language's (sub-)table
        prefix: Dotted path of `table` itself; None at the root

    Returns:
        A new nested dict with the same keys as `table`.
    """
    result: dict[str, Any] = {}
    for key, value in table.items():
        keyed_path = key if prefix is None else f"{prefix}.{key}"
        if isinstance(value, str):
            result[key] = keyed_path
        elif isinstance(value, Mapping):
            result[key] = generate_path_map(value, keyed_path)
        else:
            # non-string leaf
            result[key] = {}
    return result
