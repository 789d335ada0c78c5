"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_lookup.adapters.dataset_client import (
    DatasetClient,
    HttpxDatasetClient,
    LocalDatasetClient,
)
from food_lookup.config import Settings, resolve_dataset_dir
from food_lookup.services.catalog import CatalogService
from food_lookup.services.planner import PlannerSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dataset_client: DatasetClient
    catalog_service: CatalogService
    planner: PlannerSession
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    dataset_dir = resolve_dataset_dir(resolved_settings.dataset_dir)
    dataset_client: HttpxDatasetClient | LocalDatasetClient
    if dataset_dir is not None:
        dataset_client = LocalDatasetClient(root=dataset_dir)
    else:
        dataset_client = HttpxDatasetClient.create(
            base_url=resolved_settings.dataset_base_url,
            timeout_seconds=resolved_settings.dataset_timeout_seconds,
        )
    catalog_service = CatalogService(
        client=dataset_client,
        dataset_format=resolved_settings.dataset_format,
        csv_path=resolved_settings.dataset_csv_path,
        json_path=resolved_settings.dataset_json_path,
        header_lines=resolved_settings.dataset_header_lines,
    )
    planner = PlannerSession(
        catalog=catalog_service, default_sort=resolved_settings.default_sort
    )
    planner.set_budget(resolved_settings.max_daily_carbs)

    async def close_resources() -> None:
        await dataset_client.close()

    return AppContainer(
        settings=resolved_settings,
        dataset_client=dataset_client,
        catalog_service=catalog_service,
        planner=planner,
        close_resources=close_resources,
    )
