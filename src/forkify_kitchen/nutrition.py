"""Calorie totals for a recipe, looked up ingredient by ingredient on Spoonacular.

Two passes over the ingredient list:

1. Every ingredient description is matched against the Spoonacular ingredient
   search concurrently. The first candidate wins; a failed or empty search
   leaves the ingredient without a ``nutrition_id``.
2. For each matched ingredient, in recipe order, the nutrition detail is fetched
   for the ingredient's quantity and unit and its "Calories" entry is added to
   the total.

A lookup that fails only costs its own ingredient: it contributes 0 and the
rest of the recipe is still counted. A total of 0 is not trusted, so the
recipe's calories are left unset instead.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Any, Optional
import httpx
from forkify_kitchen.config import Config
from forkify_kitchen.fetcher import FetchError, request
from forkify_kitchen.models import Ingredient, Recipe

logger = logging.getLogger(__name__)

CALORIES = "Calories"


def _nutrition_params(config: Config, **extra: Any) -> dict[str, Any]:
    params = {**extra}
    if config.spoonacular_api_key:
        params["apiKey"] = config.spoonacular_api_key
    return params


async def resolve_ingredient_id(
    ingredient: Ingredient, client: httpx.AsyncClient, config: Config
) -> Optional[int]:
    try:
        data = await request(
            client,
            f"{config.spoonacular_api_url}search",
            params=_nutrition_params(config, query=ingredient.description),
        )
        results = data.get("results") or []
        return results[0]["id"] if results else None
    except Exception as e:
        logger.warning("Could not look up ingredient %r: %s", ingredient.description, e)
        return None


async def ingredient_calories(ingredient: Ingredient, client: httpx.AsyncClient, config: Config) -> float:
    """Calories for one matched ingredient at its quantity and unit, or 0 on any failure."""
    if ingredient.nutrition_id is None:
        return 0.0

    extra: dict[str, Any] = {}
    if ingredient.quantity:
        extra["amount"] = ingredient.quantity
    if ingredient.unit:
        extra["unit"] = ingredient.unit

    try:
        data = await request(
            client,
            f"{config.spoonacular_api_url}{ingredient.nutrition_id}/information",
            params=_nutrition_params(config, **extra),
        )
        nutrients = (data.get("nutrition") or {}).get("nutrients") or []
        calories = next((n["amount"] for n in nutrients if n.get("name") == CALORIES), None)
        return float(calories or 0)
    except Exception as e:
        logger.warning("Could not fetch calories for %r: %s", ingredient.description, e)
        return 0.0


async def calculate_calories(recipe: Recipe, client: httpx.AsyncClient, config: Config) -> Optional[float]:
    try:
        ids = await asyncio.gather(
            *(resolve_ingredient_id(ing, client, config) for ing in recipe.ingredients)
        )
        for ingredient, nutrition_id in zip(recipe.ingredients, ids):
            ingredient.nutrition_id = nutrition_id

        total = 0.0
        for ingredient in recipe.ingredients:
            total += await ingredient_calories(ingredient, client, config)
    except Exception:
        logger.warning("Calorie calculation failed for recipe %s", recipe.id, exc_info=True)
        total = 0.0

    recipe.calories = total if total > 0 else None
    logger.debug("Recipe %s calories: %s", recipe.id, recipe.calories)
    return recipe.calories
