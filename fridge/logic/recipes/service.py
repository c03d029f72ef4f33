"""Recipe search, details and discovery on top of the provider client.

Searches go through the RecipeCache first; only a miss reaches the provider,
and the fetched list is cached before it is returned, so an identical search
is a hit until the ingredient set changes.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List

from fridge.domain.Recipe import RecipeInfo, RecipeSummary
from fridge.infra.Recipe_Cache import RecipeCache
from fridge.infra.Spoonacular_Client import SpoonacularClient
from fridge.logic.text.normalizer import normalize
from fridge.utilities.constants import (
    CACHE_KEY_SEPARATOR,
    DEFAULT_RANDOM_RECIPES_NUMBER,
    DEFAULT_RECIPE_SEARCH_NUMBER,
)
from fridge.utilities.exceptions import EmptyPantryError, PersistenceWriteError

logger = logging.getLogger(__name__)

__all__ = ["search_terms", "cache_key", "RecipeService"]


def search_terms(terms: Iterable[str]) -> List[str]:
    """Sorted, de-duplicated, lower-cased terms without empties."""
    unique = {normalize(t) for t in terms}
    unique.discard("")
    return sorted(unique)


def cache_key(terms: Iterable[str]) -> str:
    """Canonical search terms joined by commas, e.g. ``"egg,onion,tomato"``."""
    return CACHE_KEY_SEPARATOR.join(search_terms(terms))


class RecipeService:
    def __init__(self, client: SpoonacularClient, cache: RecipeCache,
                 search_number: int = DEFAULT_RECIPE_SEARCH_NUMBER):
        self.client = client
        self.cache = cache
        self.search_number = search_number

    async def find_recipes(self, terms: Iterable[str]) -> List[RecipeSummary]:
        """Recipes for a set of target-vocabulary ingredient terms, cached per set."""
        unique = search_terms(terms)
        if not unique:
            raise EmptyPantryError("No ingredients to search with")
        key = CACHE_KEY_SEPARATOR.join(unique)

        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"CACHE HIT: loading {len(cached)} recipe(s) for key {key!r}")
            return cached

        logger.info(f"CACHE MISS: querying recipe provider for key {key!r}")
        recipes = await self.client.find_by_ingredients(unique, self.search_number)
        try:
            await asyncio.to_thread(self.cache.put, key, recipes)
        except PersistenceWriteError:
            logger.exception(f"Could not cache search results for key {key!r}")
        return recipes

    async def recipe_details(self, recipe_id: int) -> RecipeInfo:
        return await self.client.get_information(recipe_id)

    async def random_recipes(self, number: int = DEFAULT_RANDOM_RECIPES_NUMBER) -> List[RecipeInfo]:
        return await self.client.get_random(number)
