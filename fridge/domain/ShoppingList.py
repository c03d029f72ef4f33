"""ShoppingList aggregate: items to purchase, each either active or bought."""
from typing import Any, Dict, List, Optional


class ShoppingItem:
    def __init__(self, name: str, is_bought: bool = False):
        self.name = name
        self.is_bought = is_bought

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return (self.name, self.is_bought) == (other.name, other.is_bought)

    def __str__(self) -> str:
        return f"[{'x' if self.is_bought else ' '}] {self.name}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "is_bought": self.is_bought}


class ShoppingList:
    def __init__(self, items: Optional[List[ShoppingItem]] = None):
        self.items: List[ShoppingItem] = list(items) if items else []

    def find(self, name: str) -> Optional[ShoppingItem]:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def add_item(self, name: str) -> ShoppingItem:
        '''
        Adds an item, or puts a bought item with the same name back on the list.
        '''
        existing = self.find(name)
        if existing is not None:
            existing.is_bought = False
            return existing
        item = ShoppingItem(name)
        self.items.append(item)
        return item

    def toggle(self, name: str) -> ShoppingItem:
        item = self.find(name)
        if item is None:
            raise KeyError(name)
        item.is_bought = not item.is_bought
        return item

    def is_active(self, name: str) -> bool:
        item = self.find(name)
        return item is not None and not item.is_bought

    def get_items(self) -> List[ShoppingItem]:
        '''
        Returns items not yet bought first, then by name.
        '''
        return sorted(self.items, key=lambda i: (i.is_bought, i.name))

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.get_items())
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
