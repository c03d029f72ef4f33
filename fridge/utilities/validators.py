"""
Input validation schemas using Pydantic for the JSON API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class PantryTermInput(BaseModel):
    """Schema for adding an ingredient to the pantry (source vocabulary)."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace and reject blank names.

        Commas are rejected: they separate terms in recipe searches.
        """
        v = v.strip()
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        if ',' in v:
            raise ValueError('Ingredient name cannot contain commas')
        return v


class TranslationOverrideInput(BaseModel):
    """Schema for a manual translation correction."""
    source_term: str = Field(..., min_length=1, max_length=100)
    target_term: str = Field(..., min_length=1, max_length=100)

    @field_validator('source_term', 'target_term')
    @classmethod
    def not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Translation terms cannot be empty')
        if ',' in v:
            raise ValueError('Translation terms cannot contain commas')
        return v


class RecipeSearchInput(BaseModel):
    """Optional explicit ingredient list; the pantry is used when omitted."""
    ingredients: Optional[List[str]] = None

    @field_validator('ingredients')
    @classmethod
    def drop_blank(cls, v):
        if v is None:
            return v
        if any(',' in i for i in v if i):
            raise ValueError('Ingredient names cannot contain commas')
        return [i.strip() for i in v if i and i.strip()]


class MissingIngredientInput(BaseModel):
    """Schema for sending a missing recipe ingredient to the shopping list."""
    id: int = 0
    name: str = Field(..., min_length=1, max_length=200)
    amount: float = Field(0, ge=0)
    unit: str = Field('', max_length=50)


class MissingListInput(BaseModel):
    """Recipes whose missing ingredients should be merged into one list."""
    recipe_ids: List[int] = Field(..., min_length=1, max_length=20)
