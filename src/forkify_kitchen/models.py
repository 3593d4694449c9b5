from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field
from forkify_kitchen.config import Config


class Ingredient(BaseModel):
    quantity: Optional[float] = None
    unit: str = ""
    description: str
    # Spoonacular id, set while calculating calories; never serialized
    nutrition_id: Optional[int] = Field(default=None, exclude=True)


class Recipe(BaseModel):
    id: str
    title: str
    publisher: str
    source_url: str
    image: str
    servings: int
    cooking_time: int
    ingredients: list[Ingredient] = Field(default_factory=list)
    calories: Optional[float] = None
    key: Optional[str] = None
    bookmarked: bool = False


class RecipeSummary(BaseModel):
    id: str
    title: str
    publisher: str
    image: str
    key: Optional[str] = None


class SearchState(BaseModel):
    query: str = ""
    results: list[RecipeSummary] = Field(default_factory=list)
    page: int = 1
    results_per_page: int = Field(default=10, ge=1, frozen=True)


class AppState(BaseModel):
    recipe: Optional[Recipe] = None
    search: SearchState = Field(default_factory=SearchState)
    bookmarks: list[Recipe] = Field(default_factory=list)


def new_state(config: Config) -> AppState:
    return AppState(search=SearchState(results_per_page=config.results_per_page))
