from __future__ import annotations
import logging
from typing import Any
import httpx
from pydantic import ValidationError
from forkify_kitchen.config import Config
from forkify_kitchen.fetcher import NotFoundError, ParseError, request
from forkify_kitchen.models import AppState, Ingredient, Recipe

logger = logging.getLogger(__name__)


def recipe_from_wire(data: dict[str, Any]) -> Recipe:
    """Map a forkify ``{"data": {"recipe": ...}}`` envelope onto a Recipe."""
    try:
        recipe = (data.get("data") or {}).get("recipe")
    except AttributeError as e:
        raise ParseError(f"Unexpected recipe response: {e}") from e
    if not recipe:
        raise NotFoundError("Response did not contain a recipe.")
    try:
        return Recipe(
            id=recipe["id"],
            title=recipe["title"],
            publisher=recipe["publisher"],
            source_url=recipe["source_url"],
            image=recipe["image_url"],
            servings=recipe["servings"],
            cooking_time=recipe["cooking_time"],
            ingredients=[Ingredient.model_validate(i) for i in recipe.get("ingredients", [])],
            key=recipe.get("key"),
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise ParseError(f"Unexpected recipe response: {e}") from e


async def load_recipe(state: AppState, recipe_id: str, client: httpx.AsyncClient, config: Config) -> Recipe:
    data = await request(client, f"{config.forkify_api_url}{recipe_id}", params=config.recipe_params())
    recipe = recipe_from_wire(data)
    recipe.bookmarked = any(b.id == recipe_id for b in state.bookmarks)
    state.recipe = recipe
    logger.debug("Loaded recipe %s (%d ingredients)", recipe.id, len(recipe.ingredients))
    return recipe
