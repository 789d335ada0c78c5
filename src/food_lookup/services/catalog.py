"""Food catalog loading."""

import logging
from dataclasses import dataclass
from typing import Literal

import httpx

from food_lookup.adapters.dataset_client import DatasetClient
from food_lookup.domain.errors import DatasetLoadError
from food_lookup.domain.foods import Food
from food_lookup.services.ingestion import (
    DEFAULT_HEADER_LINES,
    foods_from_records,
    parse_foods_csv,
)

DatasetFormat = Literal["csv", "json"]

_logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    """Loads the food collection in tabular or structured mode."""

    client: DatasetClient
    dataset_format: DatasetFormat = "csv"
    csv_path: str = "data/foodData.csv"
    json_path: str = "data/foods.json"
    header_lines: int = DEFAULT_HEADER_LINES

    async def load(self) -> list[Food]:
        """Fetch and parse the dataset; any failure raises DatasetLoadError."""
        path = self.json_path if self.dataset_format == "json" else self.csv_path
        try:
            if self.dataset_format == "json":
                foods = foods_from_records(await self.client.fetch_json(path))
            else:
                foods = parse_foods_csv(
                    await self.client.fetch_text(path), self.header_lines
                )
        except DatasetLoadError:
            raise
        except httpx.HTTPStatusError as exc:
            raise DatasetLoadError(
                f"HTTP error! status: {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, OSError, UnicodeDecodeError, ValueError) as exc:
            raise DatasetLoadError(f"Could not read {path}: {exc}") from exc
        _logger.info(
            "Loaded food dataset: format=%s path=%s foods=%s",
            self.dataset_format,
            path,
            len(foods),
        )
        return foods
