"""Shopping list workflow.

Missing recipe ingredients are listed under their pantry-vocabulary name so
that buying one can move it straight into the pantry.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from fridge.domain.Ingredient import Ingredient
from fridge.domain.ShoppingList import ShoppingItem
from fridge.events.Event_Bus import EventBus, SHOPPING_ITEM_ADDED, SHOPPING_ITEM_BOUGHT
from fridge.infra.ShoppingList_Repository import ShoppingListRepository
from fridge.logic.pantry.service import PantryService

logger = logging.getLogger(__name__)

__all__ = ["ShoppingService"]


class ShoppingService:
    def __init__(self, repository: ShoppingListRepository, pantry: PantryService, bus: Optional[EventBus] = None):
        self.repository = repository
        self.pantry = pantry
        self.bus = bus

    def _publish(self, event_name: str, payload) -> None:
        if self.bus is not None:
            self.bus.publish(event_name, payload)

    def list_items(self) -> List[ShoppingItem]:
        return self.repository.load().get_items()

    def shopping_name(self, ingredient: Ingredient) -> str:
        """Name a recipe ingredient is listed under (translated back when possible)."""
        return self.pantry.table.to_source(ingredient.name)

    def is_active(self, ingredient: Ingredient) -> bool:
        return self.repository.load().is_active(self.shopping_name(ingredient))

    def add_missing(self, ingredient: Ingredient) -> ShoppingItem:
        """Put a missing ingredient on the list; a bought entry is reactivated."""
        name = self.shopping_name(ingredient)
        shopping_list = self.repository.load()
        reactivated = shopping_list.find(name) is not None
        item = shopping_list.add_item(name)
        self.repository.save_item(item)
        self._publish(SHOPPING_ITEM_ADDED, {"name": name, "reactivated": reactivated})
        return item

    def toggle(self, name: str) -> ShoppingItem:
        """Flip an item's bought flag. Newly bought items are added to the pantry if absent.

        Raises KeyError for an unknown item.
        """
        shopping_list = self.repository.load()
        item = shopping_list.toggle(name)
        self.repository.save_item(item)
        added = False
        if item.is_bought and not self.pantry.has_term(name):
            self.pantry.add_term(name)
            added = True
            logger.info(f"Bought item {name!r} added to pantry")
        if item.is_bought:
            self._publish(SHOPPING_ITEM_BOUGHT, {"name": name, "added_to_pantry": added})
        return item

    def remove(self, name: str) -> bool:
        return self.repository.delete_item(name)
