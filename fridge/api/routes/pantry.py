from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fridge.api.dependencies import AppContext, get_context
from fridge.utilities.validators import PantryTermInput, TranslationOverrideInput

router = APIRouter(prefix="/api", tags=["pantry"])


@router.get("/pantry")
def list_pantry(ctx: AppContext = Depends(get_context)):
    items = ctx.pantry.list_terms()
    return {
        "items": [t.to_dict() for t in items],
        "count": len(items),
        "unresolved_count": sum(1 for t in items if not t.resolved),
    }


@router.post("/pantry", status_code=201)
def add_pantry_term(data: PantryTermInput, ctx: AppContext = Depends(get_context)):
    try:
        term = ctx.pantry.add_term(data.name)
    except ValueError:
        raise HTTPException(status_code=400, detail="Ingredient already exists")
    return term.to_dict()


@router.get("/pantry/unresolved")
def list_unresolved(ctx: AppContext = Depends(get_context)):
    items = ctx.pantry.unresolved_terms()
    return {"items": [t.to_dict() for t in items], "count": len(items)}


@router.delete("/pantry/{name}")
def delete_pantry_term(name: str, ctx: AppContext = Depends(get_context)):
    if not ctx.pantry.remove_term(name):
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return {"deleted": True}


@router.get("/pantry/alerts")
def pantry_alerts(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
    ctx: AppContext = Depends(get_context),
):
    """
    Return recent pantry/shopping events (unresolved translations, corrections, purchases).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/pantry/alerts?since=<next_cursor>
    """
    return ctx.events.get_events(since)


@router.get("/translations")
def list_translations(ctx: AppContext = Depends(get_context)):
    overrides = ctx.table.overrides()
    return {"items": [o.to_dict() for o in overrides], "count": len(overrides)}


@router.post("/translations")
def save_translation(data: TranslationOverrideInput, ctx: AppContext = Depends(get_context)):
    """Manual translation for a pantry term; re-resolves matching pantry items."""
    override = ctx.pantry.correct_translation(data.source_term, data.target_term)
    return {"override": override.to_dict(), "pantry": [t.to_dict() for t in ctx.pantry.list_terms()]}


@router.delete("/translations/{source_term}")
def delete_translation(source_term: str, ctx: AppContext = Depends(get_context)):
    if not ctx.pantry.remove_translation(source_term):
        raise HTTPException(status_code=404, detail="Translation not found")
    return {"deleted": True}
