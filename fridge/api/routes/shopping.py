from fastapi import APIRouter, Depends, HTTPException

from fridge.api.dependencies import AppContext, get_context
from fridge.domain.Ingredient import Ingredient
from fridge.utilities.validators import MissingIngredientInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


@router.get("")
def list_shopping(ctx: AppContext = Depends(get_context)):
    items = ctx.shopping.list_items()
    return {
        "items": [i.to_dict() for i in items],
        "count": len(items),
        "active_count": sum(1 for i in items if not i.is_bought),
    }


@router.post("", status_code=201)
def add_missing_ingredient(data: MissingIngredientInput, ctx: AppContext = Depends(get_context)):
    ingredient = Ingredient(id=data.id, name=data.name, amount=data.amount, unit=data.unit)
    return ctx.shopping.add_missing(ingredient).to_dict()


@router.post("/{name}/toggle")
def toggle_item(name: str, ctx: AppContext = Depends(get_context)):
    try:
        item = ctx.shopping.toggle(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Item not in shopping list")
    return item.to_dict()


@router.delete("/{name}")
def delete_item(name: str, ctx: AppContext = Depends(get_context)):
    if not ctx.shopping.remove(name):
        raise HTTPException(status_code=404, detail="Item not in shopping list")
    return {"deleted": True}
