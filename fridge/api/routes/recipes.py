import asyncio
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from fridge.api.dependencies import AppContext, get_context
from fridge.logic.shopping.list_builder import build_shopping_list
from fridge.utilities.validators import MissingListInput, RecipeSearchInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.post("/search")
async def search_recipes(data: Optional[RecipeSearchInput] = Body(default=None),
                         ctx: AppContext = Depends(get_context)):
    """Recipes for the pantry (or an explicit ingredient list), served from cache when possible."""
    names = data.ingredients if data is not None and data.ingredients else None
    terms = ctx.pantry.target_terms(names)
    recipes = await ctx.recipes.find_recipes(terms)
    ordered = sorted(recipes, key=lambda r: r.title)
    return {"ingredients": terms, "count": len(ordered), "recipes": [r.to_dict() for r in ordered]}


@router.get("/random")
async def random_recipes(number: Optional[int] = Query(default=None, ge=1, le=100),
                         ctx: AppContext = Depends(get_context)):
    recipes = await ctx.recipes.random_recipes(number or ctx.random_number)
    ordered = sorted(recipes, key=lambda r: r.title)
    return {"count": len(ordered), "recipes": [r.to_dict() for r in ordered]}


@router.delete("/cache")
def clear_cache(key: Optional[str] = Query(default=None), ctx: AppContext = Depends(get_context)):
    ctx.cache.clear(key)
    return {"cleared": key if key is not None else "all", "remaining": ctx.cache.keys()}


@router.post("/missing")
async def missing_for_recipes(data: MissingListInput, ctx: AppContext = Depends(get_context)):
    """Merged missing ingredients for several recipes at once."""
    infos = await asyncio.gather(*(ctx.recipes.recipe_details(rid) for rid in data.recipe_ids))
    missing = build_shopping_list(infos, ctx.pantry.owned_target_terms())
    return {"recipe_ids": data.recipe_ids, "count": len(missing), "missing": [i.to_dict() for i in missing]}


@router.get("/{recipe_id}")
async def recipe_detail(recipe_id: int, ctx: AppContext = Depends(get_context)):
    """Recipe details with its ingredients split into owned and missing."""
    info = await ctx.recipes.recipe_details(recipe_id)
    result = ctx.pantry.classify(info.ingredients)
    classification = result.to_dict()
    for entry, ingredient in zip(classification["missing"], result.missing):
        entry["in_shopping_list"] = ctx.shopping.is_active(ingredient)
    return {"recipe": info.to_dict(), "classification": classification}
