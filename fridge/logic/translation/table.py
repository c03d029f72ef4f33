"""Layered translation lookup: user overrides first, built-in table second.

The two layers stay separate key spaces, so overrides can be edited live
without ever touching the built-in table.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, NamedTuple, Optional

from fridge.domain.TranslationOverride import TranslationOverride
from fridge.infra.Override_Repository import OverrideRepository
from fridge.logic.text.normalizer import display_name, normalize
from fridge.logic.translation.builtin import HEBREW_TO_ENGLISH

__all__ = ["Resolution", "TranslationTable"]


class Resolution(NamedTuple):
    target_term: str
    succeeded: bool


class TranslationTable:
    def __init__(self, overrides: OverrideRepository, builtin: Optional[Mapping[str, str]] = None):
        self._overrides = overrides
        raw = HEBREW_TO_ENGLISH if builtin is None else builtin
        self._builtin: Dict[str, str] = {normalize(k): v for k, v in raw.items()}

    def resolve(self, source_term: str) -> Resolution:
        """Translate one pantry term. Never raises; a miss returns the normalized input."""
        key = normalize(source_term)
        override = self._overrides.get(key)
        if override is not None and override.target_term:
            return Resolution(override.target_term, True)
        if key in self._builtin:
            return Resolution(self._builtin[key], True)
        return Resolution(key, False)

    def add_override(self, source_term: str, target_term: str) -> TranslationOverride:
        """Record a manual translation; last write wins for a given source key."""
        override = TranslationOverride(normalize(source_term), normalize(target_term))
        self._overrides.save(override)
        return override

    def remove_override(self, source_term: str) -> bool:
        return self._overrides.delete(normalize(source_term))

    def overrides(self) -> List[TranslationOverride]:
        return self._overrides.all()

    def to_source(self, target_name: str) -> str:
        """Translate a recipe ingredient name back to the pantry vocabulary.

        Falls back to the ingredient's display name when neither layer knows it.
        """
        wanted = normalize(display_name(target_name))
        for override in self._overrides.all():
            if override.target_term and normalize(display_name(override.target_term)) == wanted:
                return override.source_term
        for source, target in self._builtin.items():
            if normalize(display_name(target)) == wanted:
                return source
        return display_name(target_name)
