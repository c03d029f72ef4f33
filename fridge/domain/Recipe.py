"""Recipe domain entities as returned by the recipe provider.

RecipeSummary is a search hit (id, title, image); RecipeInfo is the full
detail record with the ingredient list.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fridge.domain.Ingredient import Ingredient

_TAG = re.compile(r"<[^>]+>")


def strip_html(text: str) -> str:
    """Remove markup tags and the two entities the provider commonly emits."""
    return _TAG.sub("", text or "").replace("&nbsp;", " ").replace("&amp;", "&")


@dataclass(frozen=True)
class RecipeSummary:
    id: int
    title: str
    image: str = ""

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "RecipeSummary":
        return RecipeSummary(
            id=int(data["id"]),
            title=str(data["title"]),
            image=str(data.get("image") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "image": self.image}


@dataclass(frozen=True)
class RecipeInfo:
    id: int
    title: str
    image: str = ""
    ingredients: List[Ingredient] = field(default_factory=list)
    instructions: Optional[str] = None
    source_url: Optional[str] = None
    ready_in_minutes: Optional[int] = None

    @property
    def plain_instructions(self) -> str:
        return strip_html(self.instructions or "").strip()

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "RecipeInfo":
        ready = data.get("readyInMinutes")
        return RecipeInfo(
            id=int(data["id"]),
            title=str(data["title"]),
            image=str(data.get("image") or ""),
            ingredients=[Ingredient.from_dict(i) for i in data.get("extendedIngredients") or []],
            instructions=data.get("instructions"),
            source_url=data.get("sourceUrl"),
            ready_in_minutes=int(ready) if ready is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": self.plain_instructions,
            "source_url": self.source_url,
            "ready_in_minutes": self.ready_in_minutes,
        }
