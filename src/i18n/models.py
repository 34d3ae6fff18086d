"""
src/i18n/models.py
──────────────────
Data models for translation lookups.

TranslationState is the live handle returned by Registry.translate(): a mutable
cell whose `value` is overwritten in place when the active language changes.
Found / MISSING tag the outcome of a single path traversal step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


class TranslationState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    path: str
    args: list[Any] = []
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Found:
    node: Any


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()
