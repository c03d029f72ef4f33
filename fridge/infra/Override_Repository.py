"""Translation override persistence (one entry per normalized source term)."""
import logging
from typing import List, Optional

from fridge.domain.TranslationOverride import TranslationOverride
from fridge.infra.Json_Store import KeyValueStore

logger = logging.getLogger(__name__)


class OverrideRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, source_key: str) -> Optional[TranslationOverride]:
        target = self._store.get(source_key)
        if target is None:
            return None
        return TranslationOverride(source_term=source_key, target_term=str(target))

    def save(self, override: TranslationOverride) -> None:
        """Store the override, replacing any previous one for the same key."""
        self._store.put(override.source_term, override.target_term)
        logger.info(f"Translation override saved: {override.source_term} -> {override.target_term}")

    def delete(self, source_key: str) -> bool:
        return self._store.delete(source_key)

    def all(self) -> List[TranslationOverride]:
        return [TranslationOverride(source_term=k, target_term=str(v)) for k, v in self._store.items()]
