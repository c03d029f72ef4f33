"""Shared FastAPI dependencies: the wired service graph.

The stores are created here and passed into every component explicitly;
nothing below the API layer reaches for a global.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fridge.events.Event_Bus import EventBus
from fridge.events.web_observers import EventLog
from fridge.infra.Json_Store import JsonFileStore, KeyValueStore
from fridge.infra.Override_Repository import OverrideRepository
from fridge.infra.Pantry_Repository import PantryRepository
from fridge.infra.Recipe_Cache import RecipeCache
from fridge.infra.ShoppingList_Repository import ShoppingListRepository
from fridge.infra.Spoonacular_Client import SpoonacularClient
from fridge.infra.paths import OVERRIDES_FILE, PANTRY_FILE, RECIPE_CACHE_FILE, SHOPPING_LIST_FILE
from fridge.logic.pantry.service import PantryService
from fridge.logic.recipes.service import RecipeService
from fridge.logic.shopping.service import ShoppingService
from fridge.logic.translation.table import TranslationTable
from fridge.utilities.config import (
    HTTP_TIMEOUT_SECONDS,
    RANDOM_RECIPES_NUMBER,
    RECIPE_SEARCH_NUMBER,
    SPOONACULAR_API_KEY,
    SPOONACULAR_BASE_URL,
)


@dataclass
class AppContext:
    bus: EventBus
    events: EventLog
    table: TranslationTable
    cache: RecipeCache
    pantry: PantryService
    shopping: ShoppingService
    recipes: RecipeService
    random_number: int = RANDOM_RECIPES_NUMBER


def build_context(*, pantry_store: KeyValueStore, override_store: KeyValueStore,
                  cache_store: KeyValueStore, shopping_store: KeyValueStore,
                  client: SpoonacularClient, search_number: int = RECIPE_SEARCH_NUMBER,
                  random_number: int = RANDOM_RECIPES_NUMBER) -> AppContext:
    bus = EventBus()
    events = EventLog()
    events.start(bus)
    table = TranslationTable(OverrideRepository(override_store))
    cache = RecipeCache(cache_store)
    pantry = PantryService(PantryRepository(pantry_store), table, bus)
    shopping = ShoppingService(ShoppingListRepository(shopping_store), pantry, bus)
    recipes = RecipeService(client, cache, search_number=search_number)
    return AppContext(bus=bus, events=events, table=table, cache=cache, pantry=pantry,
                      shopping=shopping, recipes=recipes, random_number=random_number)


def default_context() -> AppContext:
    """Context backed by the JSON files under DATA_DIR and the configured provider."""
    return build_context(
        pantry_store=JsonFileStore(PANTRY_FILE),
        override_store=JsonFileStore(OVERRIDES_FILE),
        cache_store=JsonFileStore(RECIPE_CACHE_FILE),
        shopping_store=JsonFileStore(SHOPPING_LIST_FILE),
        client=SpoonacularClient(SPOONACULAR_API_KEY, SPOONACULAR_BASE_URL, HTTP_TIMEOUT_SECONDS),
    )


_context: Optional[AppContext] = None


def get_context() -> AppContext:
    """Provide a shared AppContext across all routes."""
    global _context
    if _context is None:
        _context = default_context()
    return _context
