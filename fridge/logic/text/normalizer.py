"""Ingredient term normalization.

``normalize`` builds the matching/lookup key; ``display_name`` builds the
human-facing name used for the missing list and the shopping list.
"""
import re

from fridge.utilities.constants import IRREGULAR_DISPLAY_NAMES

__all__ = ["normalize", "display_name", "display_key"]

_WORD = re.compile(r"\S+")


def normalize(term: str) -> str:
    """Trim surrounding whitespace and fold to lower case. Total: ``None`` -> ``""``."""
    if not term:
        return ""
    return term.strip().lower()


def _capitalize_word(match: re.Match) -> str:
    word = match.group(0)
    return word[:1].upper() + word[1:].lower()


def display_name(name: str) -> str:
    """Return the display form of a recipe ingredient name.

    Known misspellings/plurals collapse to one canonical name
    (``tomatoe`` -> ``Tomato``), anything else is capitalized word by word.
    """
    key = normalize(name)
    if key in IRREGULAR_DISPLAY_NAMES:
        return IRREGULAR_DISPLAY_NAMES[key]
    return _WORD.sub(_capitalize_word, (name or "").strip())


def display_key(name: str, unit: str) -> tuple[str, str]:
    """Merge key for missing ingredients: (display name, unit), both case-folded."""
    return normalize(display_name(name)), normalize(unit)
