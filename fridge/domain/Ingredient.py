"""Ingredient domain value: a recipe-side ingredient (id, name, amount, unit)."""
from dataclasses import dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class Ingredient:
    id: int
    name: str
    amount: float = 0.0
    unit: str = ""

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Amount cannot be negative: {self.amount}")

    @property
    def description(self) -> str:
        '''Human readable "amount unit name", e.g. "2 pcs Onion".'''
        return " ".join(p for p in (f"{self.amount:g}", self.unit, self.name) if p)

    def renamed(self, name: str) -> "Ingredient":
        return replace(self, name=name)

    def with_amount(self, amount: float) -> "Ingredient":
        return replace(self, amount=amount)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Ingredient":
        '''Creates an Ingredient from a provider (or API) payload. Ignores unknown keys.'''
        return Ingredient(
            id=int(data.get("id") or 0),
            name=str(data["name"]),
            amount=float(data.get("amount") or 0),
            unit=str(data.get("unit") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "description": self.description,
        }
