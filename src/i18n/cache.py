"""
src/i18n/cache.py
─────────────────
Memoizes one TranslationState per (path, args) request.

Keys are ``"<path>.<arg0>.<arg1>…"``. Arguments whose string form contains a
dot, or that stringify identically, share a key; the first state created for
a key wins and later calls get it back unchanged. Nothing is ever evicted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from src.i18n.models import TranslationState
from src.i18n.resolver import normalize_args

log = logging.getLogger(__name__)

ResolveFn = Callable[[str, list[Any]], str]


def cache_key(path: str, args: Sequence[Any]) -> str:
    return f"{path}." + ".".join(str(arg) for arg in args)


class StateCache:
    def __init__(self, resolve: ResolveFn) -> None:
        self._resolve = resolve
        self._states: dict[str, TranslationState] = {}

    def translate(self, path: str, *args: Any) -> TranslationState:
        """Return the cached state for (path, args), creating it on first use."""
        args_list = normalize_args(args)
        key = cache_key(path, args_list)
        state = self._states.get(key)
        if state is None:
            log.debug("Cache miss for %r", key)
            state = TranslationState(
                path=path,
                args=args_list,
                value=self._resolve(path, args_list),
            )
            self._states[key] = state
        return state

    def __iter__(self) -> Iterator[TranslationState]:
        return iter(list(self._states.values()))

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, key: object) -> bool:
        return key in self._states
