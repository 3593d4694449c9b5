from __future__ import annotations
import asyncio
import logging
import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from forkify_kitchen.bookmarks import BookmarkStore, CorruptBookmarksError
from forkify_kitchen.config import Config
from forkify_kitchen.fetcher import FetchError, make_client
from forkify_kitchen.formatter import format_recipe
from forkify_kitchen.models import AppState, new_state
from forkify_kitchen.nutrition import calculate_calories
from forkify_kitchen.recipes import load_recipe
from forkify_kitchen.search import get_search_results_page, load_search_results, page_count
from forkify_kitchen.servings import ServingsError, update_servings
from forkify_kitchen.upload import RecipeFormError, upload_recipe

console = Console()
err_console = Console(stderr=True)

FORM_FIELDS = [
    ("title", "Title"),
    ("source_url", "Source URL"),
    ("image_url", "Image URL"),
    ("publisher", "Publisher"),
    ("cooking_time", "Cooking time (minutes)"),
    ("servings", "Servings"),
]


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(1)


def _open() -> tuple[Config, AppState, BookmarkStore]:
    try:
        config = Config()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")
    state = new_state(config)
    store = BookmarkStore(state, base_dir=config.bookmarks_dir)
    try:
        store.load()
    except CorruptBookmarksError as e:
        err_console.print(f"[yellow]Warning:[/yellow] {e}")
        err_console.print("Starting with no bookmarks.")
    return config, state, store


@click.group()
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool):
    """Forkify Kitchen: recipe search with calorie counts and bookmarks."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.argument("query")
@click.option("--page", default=1, type=int, show_default=True, help="Page of results to show")
def search(query: str, page: int):
    """Search recipes by ingredient or name."""
    config, state, _ = _open()

    async def run():
        async with make_client(config) as client:
            await load_search_results(state, query, client, config)

    try:
        asyncio.run(run())
    except FetchError as e:
        _fail(str(e))

    results = get_search_results_page(state, page)
    if not state.search.results:
        console.print(f"No recipes found for [bold]{query}[/bold].")
        return

    table = Table(title=f"Results for '{query}'")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Publisher")
    table.add_column("Yours", justify="center")
    for r in results:
        table.add_row(r.id, r.title, r.publisher, "✓" if r.key else "")
    console.print(table)
    console.print(f"[dim]Page {state.search.page} of {page_count(state)}[/dim]")


@cli.command()
@click.argument("recipe_id")
@click.option("--servings", default=None, type=int, help="Rescale ingredients to this many servings")
@click.option("--calories/--no-calories", default=True, show_default=True, help="Look up calories on Spoonacular")
def show(recipe_id: str, servings: int | None, calories: bool):
    """Show a recipe with its ingredients."""
    config, state, _ = _open()

    async def run():
        async with make_client(config) as client:
            recipe = await load_recipe(state, recipe_id, client, config)
            if calories:
                console.print("[dim]Counting calories...[/dim]")
                await calculate_calories(recipe, client, config)
            return recipe

    try:
        recipe = asyncio.run(run())
    except FetchError as e:
        _fail(str(e))

    if servings is not None:
        try:
            update_servings(recipe, servings)
        except ServingsError as e:
            _fail(str(e))

    console.print()
    console.print(format_recipe(recipe), markup=False)
    if recipe.bookmarked:
        console.print("\n[green]★[/green] Bookmarked")


@cli.group("bookmark")
def bookmark():
    """Manage your bookmarked recipes."""
    pass


@bookmark.command("list")
def bookmark_list():
    """Show all bookmarked recipes."""
    _, state, _ = _open()
    if not state.bookmarks:
        console.print("No bookmarks yet. Use [bold]forkify bookmark add[/bold] to save a recipe.")
        return
    console.print("\n[bold]Bookmarks[/bold]\n")
    for b in state.bookmarks:
        console.print(f"  • {b.title} [dim]({b.id})[/dim]")
    console.print()


@bookmark.command("add")
@click.argument("recipe_id")
def bookmark_add(recipe_id: str):
    """Bookmark a recipe by its ID."""
    config, state, store = _open()

    async def run():
        async with make_client(config) as client:
            return await load_recipe(state, recipe_id, client, config)

    try:
        recipe = asyncio.run(run())
    except FetchError as e:
        _fail(str(e))

    if recipe.bookmarked:
        console.print(f"[yellow]Already bookmarked:[/yellow] {recipe.title}")
        return
    store.add(recipe)
    console.print(f"[green]✓[/green] Bookmarked: [bold]{recipe.title}[/bold]")


@bookmark.command("remove")
@click.argument("recipe_id")
def bookmark_remove(recipe_id: str):
    """Remove a bookmark by recipe ID."""
    _, _, store = _open()
    if not store.is_bookmarked(recipe_id):
        _fail(f"No bookmark with ID {recipe_id}. Use 'forkify bookmark list' to see bookmarks.")
    store.remove(recipe_id)
    console.print(f"[green]✓[/green] Removed bookmark: [bold]{recipe_id}[/bold]")


@bookmark.command("clear")
@click.confirmation_option(prompt="Remove all bookmarks?")
def bookmark_clear():
    """Remove every bookmark."""
    _, _, store = _open()
    store.clear()
    console.print("[green]✓[/green] Cleared all bookmarks.")


@cli.command()
def upload():
    """Upload your own recipe and bookmark it."""
    config, state, store = _open()
    if not config.forkify_api_key:
        _fail("FORKIFY_API_KEY environment variable is required to upload recipes.")

    form: dict[str, str] = {}
    for field, label in FORM_FIELDS:
        form[field] = click.prompt(f"  {label}").strip()

    console.print("\n[bold]Ingredients[/bold] as 'quantity,unit,description' (press Enter to finish)\n")
    count = 0
    while True:
        line = click.prompt(f"  Ingredient {count + 1}", default="", show_default=False).strip()
        if not line:
            break
        count += 1
        form[f"ingredient-{count}"] = line

    async def run():
        async with make_client(config) as client:
            return await upload_recipe(state, form, client, config, store)

    try:
        recipe = asyncio.run(run())
    except (RecipeFormError, FetchError) as e:
        _fail(str(e))

    console.print(f"\n[green]✓[/green] Uploaded and bookmarked: [bold]{recipe.title}[/bold] ({recipe.id})")
