from __future__ import annotations
from typing import Any
import httpx
from forkify_kitchen.config import Config

HEADERS = {
    "User-Agent": "forkify-kitchen/0.1 (+https://github.com/forkify-kitchen)",
    "Accept": "application/json",
}


class FetchError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(FetchError):
    pass


class ParseError(FetchError):
    pass


def make_client(config: Config) -> httpx.AsyncClient:
    return httpx.AsyncClient(headers=HEADERS, follow_redirects=True, timeout=config.request_timeout)


async def request(
    client: httpx.AsyncClient,
    url: str,
    payload: dict[str, Any] | None = None,
    params: dict[str, Any] | None = None,
) -> Any:
    """Perform one JSON exchange: GET without a payload, POST with it as the body."""
    try:
        if payload is None:
            response = await client.get(url, params=params)
        else:
            response = await client.post(url, params=params, json=payload)
    except httpx.TimeoutException:
        raise FetchError(f"Request to {url} timed out.")
    except httpx.TransportError:
        raise FetchError(f"Could not connect to {url}. Check your internet connection.")
    except httpx.RequestError as e:
        raise FetchError(f"Request to {url} failed: {e}")

    try:
        data = response.json()
    except ValueError as e:
        if response.is_success:
            raise ParseError(f"Malformed response from {url}: {e}", response.status_code) from e
        data = {}

    if response.status_code == 404:
        raise NotFoundError(_error_message(data, response.status_code, "Not found"), 404)
    if response.status_code >= 400:
        raise FetchError(_error_message(data, response.status_code, "Request failed"), response.status_code)

    return data


def _error_message(data: Any, status_code: int, fallback: str) -> str:
    message = data.get("message") if isinstance(data, dict) else None
    return f"{message or fallback} ({status_code})"
