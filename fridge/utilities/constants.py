from typing import Final

SPOONACULAR_DEFAULT_BASE_URL: Final[str] = "https://api.spoonacular.com"
DEFAULT_HTTP_TIMEOUT_SECONDS: Final[int] = 20
DEFAULT_RECIPE_SEARCH_NUMBER: Final[int] = 10
DEFAULT_RANDOM_RECIPES_NUMBER: Final[int] = 10
# findByIngredients ranking: 1 = maximize used ingredients
SEARCH_RANKING: Final[int] = 1

CACHE_KEY_SEPARATOR: Final[str] = ","

# Known misspellings / plurals collapsed when building display names
IRREGULAR_DISPLAY_NAMES: Final[dict[str, str]] = {
    "tomatoe": "Tomato",
    "tomatos": "Tomato",
    "potatoe": "Potato",
    "potatos": "Potato",
}

EVENT_LOG_MAX_EVENTS: Final[int] = 300
