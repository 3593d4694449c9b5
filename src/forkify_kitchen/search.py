from __future__ import annotations
import logging
import math
from typing import Any
import httpx
from pydantic import ValidationError
from forkify_kitchen.config import Config
from forkify_kitchen.fetcher import ParseError, request
from forkify_kitchen.models import AppState, RecipeSummary

logger = logging.getLogger(__name__)


def summary_from_wire(item: dict[str, Any]) -> RecipeSummary:
    return RecipeSummary(
        id=item["id"],
        title=item["title"],
        publisher=item["publisher"],
        image=item["image_url"],
        key=item.get("key"),
    )


async def load_search_results(
    state: AppState, query: str, client: httpx.AsyncClient, config: Config
) -> list[RecipeSummary]:
    state.search.query = query
    params = {"search": query, **config.recipe_params()}
    data = await request(client, config.forkify_api_url, params=params)

    try:
        results = [summary_from_wire(r) for r in (data.get("data") or {}).get("recipes", [])]
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise ParseError(f"Unexpected search response: {e}") from e
    state.search.results = results
    state.search.page = 1
    logger.debug("Search %r returned %d recipes", query, len(results))
    return results


def get_search_results_page(state: AppState, page: int | None = None) -> list[RecipeSummary]:
    search = state.search
    if page is None:
        page = search.page
    search.page = max(page, 1)

    start = (search.page - 1) * search.results_per_page
    end = search.page * search.results_per_page
    return search.results[start:end]


def page_count(state: AppState) -> int:
    return math.ceil(len(state.search.results) / state.search.results_per_page)
