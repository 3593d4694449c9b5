from __future__ import annotations
from forkify_kitchen.models import Recipe


class ServingsError(ValueError):
    pass


def update_servings(recipe: Recipe, new_servings: int) -> Recipe:
    """Scale quantities and calories by ``new_servings / recipe.servings``.

    A recipe with 0 servings cannot be scaled. New servings below 1 are
    rejected as bad input, so a recipe is never scaled down to 0.
    """
    if recipe.servings == 0:
        raise ServingsError(f"Recipe {recipe.id} has 0 servings and cannot be rescaled.")
    if new_servings < 1:
        raise ServingsError(f"Servings must be at least 1, got {new_servings}.")

    ratio = new_servings / recipe.servings
    for ingredient in recipe.ingredients:
        if ingredient.quantity is not None:
            ingredient.quantity *= ratio
    if recipe.calories is not None:
        recipe.calories *= ratio
    recipe.servings = new_servings
    return recipe
