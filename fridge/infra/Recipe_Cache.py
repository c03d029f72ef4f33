"""Recipe search cache keyed by the canonical ingredient-set fingerprint."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from fridge.domain.Recipe import RecipeSummary
from fridge.infra.Json_Store import KeyValueStore

logger = logging.getLogger(__name__)


class RecipeCache:
    """Search results per fingerprint.

    ``get`` returns None for a key that was never cached and a (possibly empty)
    list otherwise. ``put`` replaces the whole entry in one store write.
    No expiry: an entry lives until it is overwritten or cleared.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, key: str) -> Optional[List[RecipeSummary]]:
        raw = self._store.get(key)
        if raw is None:
            return None
        return [RecipeSummary.from_dict(entry) for entry in raw]

    def put(self, key: str, recipes: Sequence[RecipeSummary]) -> None:
        self._store.put(key, [r.to_dict() for r in recipes])
        logger.debug(f"Cached {len(recipes)} recipe(s) for key {key!r}")

    def clear(self, key: Optional[str] = None) -> None:
        if key is None:
            self._store.clear()
            logger.info("Recipe cache cleared")
        else:
            self._store.delete(key)

    def keys(self) -> List[str]:
        return [k for k, _ in self._store.items()]
