"""Pantry persistence: one store entry per pantry term, keyed by normalized name."""
import logging

from fridge.domain.Pantry import Pantry
from fridge.domain.PantryTerm import PantryTerm
from fridge.infra.Json_Store import KeyValueStore

logger = logging.getLogger(__name__)


class PantryRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> Pantry:
        pantry = Pantry()
        for name, entry in self._store.items():
            data = dict(entry) if isinstance(entry, dict) else {}
            data["name"] = name
            try:
                pantry.add_item(PantryTerm.from_dict(data))
            except ValueError as e:
                logger.warning(f"Skipping invalid pantry entry {name!r}: {e}")
        return pantry

    def save_term(self, term: PantryTerm) -> None:
        self._store.put(term.name, {"target_term": term.target_term, "resolved": term.resolved})

    def delete_term(self, name: str) -> bool:
        return self._store.delete(name)
