"""Shopping list builder.

Provides build_shopping_list(recipes, owned_terms): the missing ingredients of
several recipes, merged into one list through a single aggregator so the same
ingredient needed by two recipes appears once with the summed amount.
"""
from typing import Iterable, List, Sequence

from fridge.domain.Ingredient import Ingredient
from fridge.domain.Recipe import RecipeInfo
from fridge.logic.matching.aggregator import MissingIngredientAggregator
from fridge.logic.matching.matcher import classify


def build_shopping_list(recipes: Sequence[RecipeInfo], owned_terms: Iterable[str]) -> List[Ingredient]:
    """Compute the merged missing ingredients of ``recipes``.

    Args:
        recipes: Recipe details, in the order their ingredients should be listed.
        owned_terms: Pantry terms already translated to the recipe vocabulary.

    Returns:
        Missing ingredients in first-seen order, amounts summed per (name, unit).
    """
    owned = set(owned_terms)
    aggregator = MissingIngredientAggregator()
    for recipe in recipes:
        aggregator.extend(classify(owned, recipe.ingredients).missing)
    return aggregator.items


__all__ = ['build_shopping_list']
