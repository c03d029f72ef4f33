"""Owned / missing classification of a recipe's ingredients against the pantry.

Matching runs in the recipe (target) vocabulary:

1. exact match of the normalized ingredient name against the owned set;
2. otherwise a substring match in either direction. When several owned terms
   qualify, the longest one wins and ties go to the lexicographically first,
   so the reported match does not depend on set iteration order.

Empty names never match anything: an empty string is a substring of every term.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from fridge.domain.Ingredient import Ingredient
from fridge.logic.matching.aggregator import MissingIngredientAggregator
from fridge.logic.text.normalizer import display_name, normalize

__all__ = ["ClassificationResult", "prepare_owned_terms", "find_owned_match", "classify"]


@dataclass(frozen=True)
class ClassificationResult:
    owned: Tuple[Ingredient, ...] = ()
    missing: Tuple[Ingredient, ...] = ()
    # owned term that matched each entry of ``owned``, same order
    matched_terms: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "owned": [dict(i.to_dict(), matched_term=t) for i, t in zip(self.owned, self.matched_terms)],
            "missing": [i.to_dict() for i in self.missing],
            "owned_count": len(self.owned),
            "missing_count": len(self.missing),
        }


def prepare_owned_terms(owned_terms: Iterable[str]) -> List[str]:
    """Normalize, drop empties and order owned terms for the substring pass."""
    terms = {normalize(t) for t in owned_terms}
    terms.discard("")
    return sorted(terms, key=lambda t: (-len(t), t))


def find_owned_match(candidate: str, owned_terms: Sequence[str]) -> Optional[str]:
    """Return the owned term matching ``candidate`` or None.

    ``owned_terms`` must come from ``prepare_owned_terms``.
    """
    if not candidate:
        return None
    if candidate in owned_terms:
        return candidate
    for owned in owned_terms:
        if owned in candidate or candidate in owned:
            return owned
    return None


def classify(owned_terms: Iterable[str], ingredients: Sequence[Ingredient]) -> ClassificationResult:
    """Split ``ingredients`` into owned (recipe order) and merged missing lists."""
    prepared = prepare_owned_terms(owned_terms)
    owned: List[Ingredient] = []
    matched: List[str] = []
    missing = MissingIngredientAggregator()

    for ingredient in ingredients:
        match = find_owned_match(normalize(ingredient.name), prepared)
        if match is None:
            missing.add(ingredient)
        else:
            owned.append(ingredient.renamed(display_name(ingredient.name)))
            matched.append(match)

    return ClassificationResult(owned=tuple(owned), missing=tuple(missing.items), matched_terms=tuple(matched))
