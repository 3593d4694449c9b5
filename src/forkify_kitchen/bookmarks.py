from __future__ import annotations
import json
import logging
from pathlib import Path
from forkify_kitchen.models import AppState, Recipe

logger = logging.getLogger(__name__)


class CorruptBookmarksError(Exception):
    pass


class BookmarkStore:
    """Keeps ``state.bookmarks`` mirrored to ``bookmarks.json``.

    Every add or remove rewrites the whole file. Bookmarks behave as a list:
    adding a recipe that is already bookmarked appends it again.
    """

    def __init__(self, state: AppState, base_dir: Path | None = None):
        self.state = state
        self._path = (base_dir or (Path.home() / ".forkify")) / "bookmarks.json"

    def load(self) -> list[Recipe]:
        self.state.bookmarks = []
        if not self._path.exists():
            return self.state.bookmarks
        try:
            bookmarks = [Recipe.model_validate(r) for r in json.loads(self._path.read_text())]
        except (ValueError, TypeError) as e:
            raise CorruptBookmarksError(f"Could not read bookmarks from {self._path}: {e}") from e
        self.state.bookmarks = bookmarks
        return bookmarks

    def add(self, recipe: Recipe) -> None:
        self.state.bookmarks.append(recipe)
        current = self.state.recipe
        if current is not None and current.id == recipe.id:
            current.bookmarked = True
        self._save()

    def remove(self, recipe_id: str) -> None:
        index = next((i for i, b in enumerate(self.state.bookmarks) if b.id == recipe_id), None)
        if index is None:
            logger.debug("No bookmark with id %s", recipe_id)
            return
        del self.state.bookmarks[index]
        current = self.state.recipe
        if current is not None and current.id == recipe_id:
            current.bookmarked = False
        self._save()

    def clear(self) -> None:
        self.state.bookmarks = []
        if self.state.recipe is not None:
            self.state.recipe.bookmarked = False
        self._path.unlink(missing_ok=True)

    def is_bookmarked(self, recipe_id: str) -> bool:
        return any(b.id == recipe_id for b in self.state.bookmarks)

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps([b.model_dump(mode="json") for b in self.state.bookmarks], indent=2)
        )
