import pytest
from forkify_kitchen.config import Config
from forkify_kitchen.models import new_state

FORKIFY = "https://forkify.test/api/v2/recipes/"
SPOON = "https://spoon.test/food/ingredients/"


@pytest.fixture
def config(monkeypatch, tmp_path):
    monkeypatch.setenv("FORKIFY_API_URL", FORKIFY)
    monkeypatch.setenv("FORKIFY_API_KEY", "test-key")
    monkeypatch.setenv("SPOONACULAR_API_URL", SPOON)
    monkeypatch.setenv("SPOONACULAR_API_KEY", "spoon-key")
    monkeypatch.setenv("RESULTS_PER_PAGE", "10")
    monkeypatch.setenv("BOOKMARKS_DIR", str(tmp_path))
    return Config()


@pytest.fixture
def state(config):
    return new_state(config)


def _wire_recipe(recipe_id="r1", servings=4, ingredients=None, key=None):
    recipe = {
        "id": recipe_id,
        "title": "Chicken Rice Bowl",
        "publisher": "Closet Cooking",
        "source_url": "https://example.com/chicken-rice",
        "image_url": "https://example.com/chicken-rice.jpg",
        "servings": servings,
        "cooking_time": 45,
        "ingredients": ingredients if ingredients is not None else [
            {"quantity": 8, "unit": "oz", "description": "chicken"},
            {"quantity": None, "unit": "", "description": "salt"},
        ],
    }
    if key:
        recipe["key"] = key
    return {"status": "success", "data": {"recipe": recipe}}


@pytest.fixture
def wire_recipe():
    return _wire_recipe
