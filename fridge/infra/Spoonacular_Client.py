"""Async client for the Spoonacular recipe API.

Each call settles exactly once: it returns the decoded result or raises one
ExternalFetchError / ConfigurationMissingError. Nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from fridge.domain.Recipe import RecipeInfo, RecipeSummary
from fridge.utilities.constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    SEARCH_RANKING,
    SPOONACULAR_DEFAULT_BASE_URL,
)
from fridge.utilities.exceptions import ConfigurationMissingError, ExternalFetchError

logger = logging.getLogger(__name__)


class SpoonacularClient:
    def __init__(self, api_key: str, base_url: str = SPOONACULAR_DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get(self, path: str, params: Dict[str, Any]) -> Any:
        if not self.api_key:
            raise ConfigurationMissingError("SPOONACULAR_API_KEY is not configured")
        query = dict(params, apiKey=self.api_key)
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Recipe provider request failed for {path}: {e}")
            raise ExternalFetchError(f"Request to recipe provider failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Recipe provider returned {response.status_code} for {path}")
            raise ExternalFetchError(
                f"Recipe provider returned HTTP {response.status_code}",
                reason="status", status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Recipe provider sent invalid JSON for {path}: {e}")
            raise ExternalFetchError("Recipe provider response is not valid JSON", reason="decoding") from e

    @staticmethod
    def _decode(payload: Any, decoder, what: str):
        try:
            return decoder(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Could not decode {what}: {e!r}")
            raise ExternalFetchError(f"Unexpected {what} payload from recipe provider", reason="decoding") from e

    async def find_by_ingredients(self, terms: Sequence[str], number: int) -> List[RecipeSummary]:
        """Search recipes that use the given (target vocabulary) ingredients."""
        payload = await self._get("/recipes/findByIngredients", {
            "ingredients": ",".join(t.lower() for t in terms),
            "number": number,
            "ranking": SEARCH_RANKING,
        })
        return self._decode(payload, lambda p: [RecipeSummary.from_dict(r) for r in p], "search result")

    async def get_information(self, recipe_id: int) -> RecipeInfo:
        payload = await self._get(f"/recipes/{int(recipe_id)}/information", {"includeNutrition": "false"})
        return self._decode(payload, RecipeInfo.from_dict, "recipe information")

    async def get_random(self, number: int) -> List[RecipeInfo]:
        payload = await self._get("/recipes/random", {"number": number})
        return self._decode(payload, lambda p: [RecipeInfo.from_dict(r) for r in p["recipes"]], "random recipes")
