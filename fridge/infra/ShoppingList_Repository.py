"""Shopping list persistence: one store entry per item name."""
from fridge.domain.ShoppingList import ShoppingItem, ShoppingList
from fridge.infra.Json_Store import KeyValueStore


class ShoppingListRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> ShoppingList:
        items = []
        for name, entry in self._store.items():
            is_bought = bool(entry.get("is_bought", False)) if isinstance(entry, dict) else False
            items.append(ShoppingItem(name, is_bought))
        return ShoppingList(items)

    def save_item(self, item: ShoppingItem) -> None:
        self._store.put(item.name, {"is_bought": item.is_bought})

    def delete_item(self, name: str) -> bool:
        return self._store.delete(name)
