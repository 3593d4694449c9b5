from __future__ import annotations
import logging
from typing import Any, Mapping
import httpx
from forkify_kitchen.bookmarks import BookmarkStore
from forkify_kitchen.config import Config
from forkify_kitchen.fetcher import request
from forkify_kitchen.models import AppState, Recipe
from forkify_kitchen.recipes import recipe_from_wire

logger = logging.getLogger(__name__)


class RecipeFormError(ValueError):
    pass


class IngredientFormatError(RecipeFormError):
    pass


def _parse_ingredient(slot: str, text: str) -> dict[str, Any]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise IngredientFormatError(
            f"Wrong ingredient format in {slot}: {text!r}. Use 'quantity,unit,description'."
        )
    quantity, unit, description = parts
    try:
        amount = float(quantity) if quantity else None
    except ValueError:
        raise IngredientFormatError(f"Quantity in {slot} is not a number: {quantity!r}")
    return {"quantity": amount, "unit": unit, "description": description}


def parse_ingredients(form: Mapping[str, str]) -> list[dict[str, Any]]:
    return [
        _parse_ingredient(slot, value)
        for slot, value in form.items()
        if slot.startswith("ingredient") and value != ""
    ]


def _as_int(form: Mapping[str, str], field: str) -> int:
    try:
        return int(form.get(field, ""))
    except ValueError:
        raise RecipeFormError(f"{field} must be a whole number, got {form.get(field)!r}")


def build_recipe_payload(form: Mapping[str, str]) -> dict[str, Any]:
    ingredients = parse_ingredients(form)
    return {
        "title": form.get("title", ""),
        "source_url": form.get("source_url", ""),
        "image_url": form.get("image_url", ""),
        "publisher": form.get("publisher", ""),
        "cooking_time": _as_int(form, "cooking_time"),
        "servings": _as_int(form, "servings"),
        "ingredients": ingredients,
    }


async def upload_recipe(
    state: AppState,
    form: Mapping[str, str],
    client: httpx.AsyncClient,
    config: Config,
    store: BookmarkStore,
) -> Recipe:
    payload = build_recipe_payload(form)
    data = await request(client, config.forkify_api_url, payload=payload, params=config.recipe_params())
    recipe = recipe_from_wire(data)
    state.recipe = recipe
    store.add(recipe)
    logger.debug("Uploaded recipe %s", recipe.id)
    return recipe
