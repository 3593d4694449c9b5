import json
import pytest
from forkify_kitchen.bookmarks import BookmarkStore, CorruptBookmarksError
from forkify_kitchen.models import AppState, Ingredient, Recipe


def _recipe(recipe_id="r1", title="Pasta") -> Recipe:
    return Recipe(
        id=recipe_id, title=title, publisher="Pub", source_url="https://example.com",
        image="", servings=2, cooking_time=15,
        ingredients=[Ingredient(quantity=1, unit="kg", description="rice", nutrition_id=20444)],
    )


@pytest.fixture
def store(tmp_path):
    return BookmarkStore(AppState(), base_dir=tmp_path)


def _persisted(tmp_path):
    return json.loads((tmp_path / "bookmarks.json").read_text())


def test_load_without_file_is_empty(store):
    assert store.load() == []
    assert store.state.bookmarks == []


def test_add_persists_full_set(store, tmp_path):
    store.add(_recipe("r1"))
    store.add(_recipe("r2"))
    assert [b["id"] for b in _persisted(tmp_path)] == ["r1", "r2"]


def test_add_does_not_persist_nutrition_id(store, tmp_path):
    store.add(_recipe())
    assert "nutrition_id" not in _persisted(tmp_path)[0]["ingredients"][0]


def test_add_marks_current_recipe(store):
    current = _recipe("r1")
    store.state.recipe = current
    store.add(current)
    assert current.bookmarked is True


def test_add_other_recipe_leaves_current_unmarked(store):
    store.state.recipe = _recipe("r1")
    store.add(_recipe("r2"))
    assert store.state.recipe.bookmarked is False


def test_add_allows_duplicates(store):
    store.add(_recipe("r1"))
    store.add(_recipe("r1"))
    assert len(store.state.bookmarks) == 2


def test_remove_clears_flag_and_persists(store, tmp_path):
    current = _recipe("r1")
    store.state.recipe = current
    store.add(current)
    store.add(_recipe("r2"))

    store.remove("r1")

    assert current.bookmarked is False
    assert [b.id for b in store.state.bookmarks] == ["r2"]
    assert [b["id"] for b in _persisted(tmp_path)] == ["r2"]


def test_add_then_remove_restores_previous_state(store, tmp_path):
    store.add(_recipe("r1"))
    before = [b.model_copy(deep=True) for b in store.state.bookmarks]

    store.add(_recipe("r2"))
    store.remove("r2")

    assert store.state.bookmarks == before


def test_removing_only_bookmark_persists_empty_list(store, tmp_path):
    store.add(_recipe("r1"))
    store.remove("r1")
    assert (tmp_path / "bookmarks.json").read_text() == "[]"


def test_remove_missing_id_is_noop(store, tmp_path):
    store.add(_recipe("r1"))
    written = (tmp_path / "bookmarks.json").read_text()

    store.remove("nope")

    assert [b.id for b in store.state.bookmarks] == ["r1"]
    assert (tmp_path / "bookmarks.json").read_text() == written


def test_remove_only_removes_first_duplicate(store):
    store.add(_recipe("r1", title="first"))
    store.add(_recipe("r1", title="second"))
    store.remove("r1")
    assert [b.title for b in store.state.bookmarks] == ["second"]


def test_load_restores_persisted_bookmarks(tmp_path):
    BookmarkStore(AppState(), base_dir=tmp_path).add(_recipe("r1"))

    state = AppState(bookmarks=[_recipe("stale")])
    loaded = BookmarkStore(state, base_dir=tmp_path).load()

    assert [b.id for b in loaded] == ["r1"]
    assert state.bookmarks == loaded


def test_load_corrupt_file_raises_and_leaves_empty(tmp_path):
    (tmp_path / "bookmarks.json").write_text("not valid json{")
    state = AppState(bookmarks=[_recipe("stale")])

    with pytest.raises(CorruptBookmarksError, match="bookmarks.json"):
        BookmarkStore(state, base_dir=tmp_path).load()

    assert state.bookmarks == []


def test_load_undecodable_file_raises_corrupt_error(tmp_path):
    (tmp_path / "bookmarks.json").write_bytes(b"\xff\xfe\x00garbage")
    state = AppState(bookmarks=[_recipe("stale")])

    with pytest.raises(CorruptBookmarksError):
        BookmarkStore(state, base_dir=tmp_path).load()

    assert state.bookmarks == []


def test_load_wrong_shape_raises(tmp_path):
    (tmp_path / "bookmarks.json").write_text(json.dumps([{"id": "r1"}]))
    with pytest.raises(CorruptBookmarksError):
        BookmarkStore(AppState(), base_dir=tmp_path).load()


def test_clear_removes_everything(store, tmp_path):
    current = _recipe("r1")
    store.state.recipe = current
    store.add(current)

    store.clear()

    assert store.state.bookmarks == []
    assert current.bookmarked is False
    assert not (tmp_path / "bookmarks.json").exists()


def test_is_bookmarked(store):
    store.add(_recipe("r1"))
    assert store.is_bookmarked("r1")
    assert not store.is_bookmarked("r2")
