from __future__ import annotations
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    forkify_api_url: str = "https://forkify-api.herokuapp.com/api/v2/recipes/"
    forkify_api_key: str = ""
    spoonacular_api_url: str = "https://api.spoonacular.com/food/ingredients/"
    spoonacular_api_key: str = ""
    results_per_page: int = 10
    request_timeout: float = 10.0
    bookmarks_dir: Path = Path.home() / ".forkify"

    @field_validator("forkify_api_url", "spoonacular_api_url", mode="after")
    @classmethod
    def trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @field_validator("results_per_page", mode="after")
    @classmethod
    def positive_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("RESULTS_PER_PAGE must be at least 1")
        return v

    @field_validator("request_timeout", mode="after")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than 0")
        return v

    def recipe_params(self) -> dict[str, str]:
        return {"key": self.forkify_api_key} if self.forkify_api_key else {}
