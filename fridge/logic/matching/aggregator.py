"""Merging of duplicate missing ingredients.

Two missing ingredients are the same thing when their display names and
units match case-insensitively; their amounts are summed into the first one.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from fridge.domain.Ingredient import Ingredient
from fridge.logic.text.normalizer import display_key, display_name

__all__ = ["add_or_merge", "MissingIngredientAggregator"]


def add_or_merge(existing: Sequence[Ingredient], candidate: Ingredient) -> List[Ingredient]:
    """Return a new list with ``candidate`` merged into its first match or appended."""
    merged = list(existing)
    key = display_key(candidate.name, candidate.unit)
    for index, item in enumerate(merged):
        if display_key(item.name, item.unit) == key:
            merged[index] = item.with_amount(item.amount + candidate.amount)
            return merged
    merged.append(candidate.renamed(display_name(candidate.name)))
    return merged


class MissingIngredientAggregator:
    """Accumulates missing ingredients in first-seen order.

    Start a fresh aggregator for every classification so totals are never
    carried over between calls.
    """

    def __init__(self, initial: Iterable[Ingredient] = ()):
        self._items: List[Ingredient] = []
        self.extend(initial)

    def add(self, ingredient: Ingredient) -> None:
        self._items = add_or_merge(self._items, ingredient)

    def extend(self, ingredients: Iterable[Ingredient]) -> None:
        for ingredient in ingredients:
            self.add(ingredient)

    @property
    def items(self) -> List[Ingredient]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
