"""
src/i18n/resolver.py
────────────────────
Resolves a dotted path plus positional arguments into a formatted string.

Traversal is lenient: a segment that does not exist on the current node is
skipped and the walk stays where it is, so a bad path returns the string form
of an intermediate node instead of raising. Only the language key is checked.

Placeholders use positional braces, ``{0}`` … ``{n}``. Each index replaces the
first occurrence of its placeholder only:

    substitute("{0} and {1}", ["x", "y"])   # → "x and y"
    substitute("{0} {0}", ["x"])            # → "x {0}"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from src.i18n.errors import UnknownLanguageError
from src.i18n.models import MISSING, Found

log = logging.getLogger(__name__)


def normalize_args(args: Sequence[Any]) -> list[Any]:
    """A single list/tuple argument is treated as the whole argument list."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return list(args[0])
    return list(args)


def step(node: Any, segment: str) -> Found | object:
    if isinstance(node, Mapping) and segment in node:
        return Found(node[segment])
    return MISSING


def walk(root: Any, path: str) -> Any:
    """Follow `path` from `root`, staying in place on missing segments."""
    node = root
    for segment in path.split("."):
        result = step(node, segment)
        if isinstance(result, Found):
            node = result.node
        else:
            log.debug("Segment %r of %r not found, staying at current node", segment, path)
    return node


def substitute(template: str, args: Sequence[Any]) -> str:
    result = template
    for index, arg in enumerate(args):
        result = result.replace(f"{{{index}}}", str(arg), 1)
    return result


def resolve(translations: Mapping[str, Any], language: str, path: str, *args: Any) -> str:
    """
    Translate `path` in `language`.

    Args:
        translations: Full table, keyed by language
        language: Language key to resolve against
        path: Dot-separated path, e.g. "menu.file.open"
        *args: Positional replacements for {0}, {1}, …, or a single list of them

    Returns:
        The formatted string.

    Raises:
        UnknownLanguageError: if `language` is not in `translations`.
    """
    if language not in translations:
        log.warning("Lookup of %r against unknown language %r", path, language)
        raise UnknownLanguageError(language, list(translations))

    template = str(walk(translations[language], path))
    return substitute(template, normalize_args(args))
