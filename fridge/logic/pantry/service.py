"""Pantry workflow: adding terms, manual translation corrections, owned-term sets.

Pantry terms are stored in the user's vocabulary. Matching and recipe search
use the recipe vocabulary, so every term is re-resolved through the
TranslationTable whenever the owned set is needed; a correction made a moment
ago is therefore picked up without touching the stored terms.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Set

from fridge.domain.Ingredient import Ingredient
from fridge.domain.PantryTerm import PantryTerm
from fridge.domain.TranslationOverride import TranslationOverride
from fridge.events.Event_Bus import EventBus, TRANSLATION_CORRECTED, TRANSLATION_UNRESOLVED
from fridge.infra.Pantry_Repository import PantryRepository
from fridge.logic.matching.matcher import ClassificationResult, classify
from fridge.logic.text.normalizer import normalize
from fridge.logic.translation.table import TranslationTable

logger = logging.getLogger(__name__)

__all__ = ["PantryService"]


class PantryService:
    def __init__(self, repository: PantryRepository, table: TranslationTable, bus: Optional[EventBus] = None):
        self.repository = repository
        self.table = table
        self.bus = bus

    def _publish(self, event_name: str, payload) -> None:
        if self.bus is not None:
            self.bus.publish(event_name, payload)

    def list_terms(self) -> List[PantryTerm]:
        return self.repository.load().get_items()

    def unresolved_terms(self) -> List[PantryTerm]:
        return self.repository.load().unresolved()

    def has_term(self, name: str) -> bool:
        return self.repository.load().find(normalize(name)) is not None

    def add_term(self, name: str) -> PantryTerm:
        """Add a pantry ingredient. Raises ValueError for blank or duplicate names.

        A failed translation does not block the add: the term is stored with
        ``resolved=False`` and an unresolved-translation event is published.
        """
        key = normalize(name)
        pantry = self.repository.load()
        resolution = self.table.resolve(key)
        term = PantryTerm(key, resolution.target_term, resolution.succeeded)
        pantry.add_item(term)
        self.repository.save_term(term)
        if not term.resolved:
            logger.warning(f"No translation found for pantry term {key!r}")
            self._publish(TRANSLATION_UNRESOLVED, {"term": term})
        return term

    def remove_term(self, name: str) -> bool:
        return self.repository.delete_term(normalize(name))

    def correct_translation(self, source_term: str, target_term: str) -> TranslationOverride:
        """Store a manual translation and re-resolve pantry terms with that name."""
        override = self.table.add_override(source_term, target_term)
        pantry = self.repository.load()
        updated = pantry.apply_override(override.source_term, override.target_term)
        for term in updated:
            self.repository.save_term(term)
        logger.info(f"Manual translation {override.source_term!r} -> {override.target_term!r} "
                    f"applied to {len(updated)} pantry term(s)")
        self._publish(TRANSLATION_CORRECTED, {
            "source_term": override.source_term,
            "target_term": override.target_term,
            "updated": len(updated),
        })
        return override

    def remove_translation(self, source_term: str) -> bool:
        """Drop a manual translation and re-resolve the pantry term it applied to.

        The term falls back to the built-in table, or becomes unresolved again
        (and is announced) when the table does not know it either.
        """
        key = normalize(source_term)
        if not self.table.remove_override(key):
            return False
        term = self.repository.load().find(key)
        if term is not None:
            resolution = self.table.resolve(key)
            term.set_resolution(resolution.target_term, resolution.succeeded)
            self.repository.save_term(term)
            if not term.resolved:
                logger.warning(f"Translation for pantry term {key!r} removed; term is untranslated again")
                self._publish(TRANSLATION_UNRESOLVED, {"term": term})
        logger.info(f"Manual translation for {key!r} removed")
        return True

    def target_terms(self, names: Optional[Iterable[str]] = None) -> List[str]:
        """Recipe-vocabulary terms for the given names (default: the whole pantry), in order."""
        if names is None:
            names = [t.name for t in self.list_terms()]
        result: List[str] = []
        for name in names:
            target = normalize(self.table.resolve(name).target_term)
            if target and target not in result:
                result.append(target)
        return result

    def owned_target_terms(self) -> Set[str]:
        return set(self.target_terms())

    def classify(self, ingredients: Sequence[Ingredient]) -> ClassificationResult:
        """Classify recipe ingredients against the current pantry."""
        return classify(self.owned_target_terms(), ingredients)
