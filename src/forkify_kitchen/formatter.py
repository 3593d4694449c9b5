from __future__ import annotations
from fractions import Fraction
from typing import Optional
from forkify_kitchen.models import Ingredient, Recipe


def format_quantity(quantity: Optional[float]) -> str:
    """Render 1.5 as '1 1/2' and 0.333 as '1/3'; None renders as ''."""
    if quantity is None:
        return ""
    frac = Fraction(quantity).limit_denominator(8)
    whole, rest = divmod(frac.numerator, frac.denominator)
    if rest == 0:
        return str(whole)
    part = f"{rest}/{frac.denominator}"
    return f"{whole} {part}" if whole else part


def format_ingredient(ingredient: Ingredient) -> str:
    return " ".join(
        p for p in (format_quantity(ingredient.quantity), ingredient.unit, ingredient.description) if p
    )


def format_recipe(recipe: Recipe) -> str:
    calories = f"{round(recipe.calories)} kcal" if recipe.calories is not None else "calories unknown"
    lines = [
        recipe.title,
        "-" * len(recipe.title),
        f"by {recipe.publisher} | {recipe.cooking_time} min | {recipe.servings} servings | {calories}",
        "",
    ]
    for ingredient in recipe.ingredients:
        lines.append(f"[ ] {format_ingredient(ingredient)}")
    lines.append("")
    lines.append(recipe.source_url)
    return "\n".join(lines).strip()
