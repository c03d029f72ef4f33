from pathlib import Path

from fridge.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
PANTRY_FILE: Path = DATA_DIR / 'pantry.json'
OVERRIDES_FILE: Path = DATA_DIR / 'translation_overrides.json'
RECIPE_CACHE_FILE: Path = DATA_DIR / 'recipe_cache.json'
SHOPPING_LIST_FILE: Path = DATA_DIR / 'shopping_list.json'

__all__ = ['DATA_DIR', 'PANTRY_FILE', 'OVERRIDES_FILE', 'RECIPE_CACHE_FILE', 'SHOPPING_LIST_FILE']
