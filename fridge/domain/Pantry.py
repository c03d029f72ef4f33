"""Pantry aggregate: ordered collection of PantryTerm items, unique by normalized name."""
from typing import List, Optional

from fridge.domain.PantryTerm import PantryTerm


class Pantry:
    def __init__(self, items: Optional[List[PantryTerm]] = None):
        self.items: List[PantryTerm] = list(items) if items else []

    def find(self, name: str) -> Optional[PantryTerm]:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def add_item(self, item: PantryTerm):
        '''
        Adds a term to the pantry. Names are unique.
        '''
        if not item.name:
            raise ValueError("Pantry term name cannot be empty")
        if self.find(item.name) is not None:
            raise ValueError(f"Ingredient '{item.name}' already exists in pantry.")
        self.items.append(item)

    def apply_override(self, name: str, target_term: str) -> List[PantryTerm]:
        '''
        Re-resolves every term with this name using a manual translation.
        '''
        changed = [item for item in self.items if item.name == name]
        for item in changed:
            item.apply_override(target_term)
        return changed

    def get_items(self) -> List[PantryTerm]:
        return self.items

    def unresolved(self) -> List[PantryTerm]:
        return [item for item in self.items if not item.resolved]

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
