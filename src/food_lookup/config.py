"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from food_lookup.domain.errors import InvalidBudgetError
from food_lookup.services.planner import parse_budget

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    dataset_base_url: str = "http://localhost:8000"
    dataset_dir: str | None = None
    dataset_format: Literal["csv", "json"] = "csv"
    dataset_csv_path: str = "data/foodData.csv"
    dataset_json_path: str = "data/foods.json"
    dataset_header_lines: int = 3
    dataset_timeout_seconds: float = 15
    default_sort: str = "alphabetical"
    max_daily_carbs: int | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("max_daily_carbs", mode="before")
    @classmethod
    def parse_max_daily_carbs(cls, value: object) -> int | None:
        """Read the initial budget with the same rules as the budget input."""
        if value is None or isinstance(value, str | int):
            try:
                return parse_budget(value)
            except InvalidBudgetError as exc:
                raise ValueError(str(exc)) from exc
        raise ValueError("max_daily_carbs must be a whole number of grams")


def resolve_dataset_dir(raw: str | None) -> Path | None:
    """Return the local dataset directory, if one is configured."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    return Path(cleaned).expanduser()
