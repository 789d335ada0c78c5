"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from food_lookup.adapters.dataset_client import DatasetClient
from food_lookup.config import Settings
from food_lookup.containers import AppContainer
from food_lookup.domain.foods import Food
from food_lookup.services.catalog import CatalogService
from food_lookup.services.planner import PlannerSession

SAMPLE_CSV = "\r\n".join(
    [
        "Food composition table",
        "Values per 100g edible portion",
        "Name,Protein,Fat,Carbohydrate,Energy,Starch,Sugars,Cholesterol,Category",
        '"Apple",0.3,0.2,"Tr",52,0,10.4,"N","fruit"',
        '"Chicken Breast",31,3.6,0,165,0,0,2.1,"meat"',
        '"Bread, white",8.4,1.9,46.1,235,41.2,3.4,0,"grains"',
        '"cheese slice",25,33,1.3,403,0,0.5,105,"dairy"',
        '"White Rice",2.7,0.3,28.2,130,28.1,0.1,0,"grains"',
        '"Chocolate",7.7,30.7,56.9,546,3.1,48,8,"sweets"',
        '"Lentils ""red""",9,0.4,15,116,13,1.8,0,"legumes"',
        '"Water",0,0,0,0,0,0,0,"drinks"',
        "Broken,1,2",
        "",
    ]
)

SAMPLE_RECORDS: list[dict[str, object]] = [
    {
        "name": "Apple",
        "category": "fruit",
        "carbs": 13.8,
        "fat": 0.2,
        "protein": 0.3,
        "cholesterol": 0,
        "calories": 52,
    },
    {
        "name": "Salmon",
        "category": "fish",
        "carbs": 0,
        "fat": 13,
        "protein": 20,
        "cholesterol": 55,
        "calories": 208,
    },
    {
        "name": "Ice",
        "category": "drinks",
        "carbs": 0,
        "fat": 0,
        "protein": 0,
        "cholesterol": 0,
        "calories": 0,
    },
]


def make_food(  # noqa: PLR0913
    name: str,
    *,
    category: str = "misc",
    carbs: float = 0.0,
    fat: float = 0.0,
    protein: float = 1.0,
    cholesterol: float = 0.0,
    calories: int = 0,
) -> Food:
    """Build a food with defaults for fields a test does not care about."""
    return Food(
        name=name,
        category=category,
        carbs=carbs,
        fat=fat,
        protein=protein,
        cholesterol=cholesterol,
        calories=calories,
    )


@dataclass
class FakeDatasetClient(DatasetClient):
    """Fake dataset client serving fixed resources."""

    resources: dict[str, object] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)
    closed: bool = False

    async def fetch_text(self, path: str) -> str:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        value = self.resources[path]
        assert isinstance(value, str)
        return value

    async def fetch_json(self, path: str) -> object:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.resources[path]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(dataset_base_url="https://foods.test")


@pytest.fixture
def dataset_client() -> FakeDatasetClient:
    return FakeDatasetClient(
        resources={
            "data/foodData.csv": SAMPLE_CSV,
            "data/foods.json": SAMPLE_RECORDS,
        }
    )


@pytest.fixture
def catalog_service(dataset_client: FakeDatasetClient) -> CatalogService:
    return CatalogService(client=dataset_client)


@pytest.fixture
def planner(catalog_service: CatalogService) -> PlannerSession:
    session = PlannerSession(catalog=catalog_service)
    assert asyncio.run(session.load_dataset())
    return session


@pytest.fixture
def container(
    settings: Settings,
    dataset_client: FakeDatasetClient,
    catalog_service: CatalogService,
) -> AppContainer:
    planner = PlannerSession(catalog=catalog_service)

    async def close_resources() -> None:
        await dataset_client.close()

    return AppContainer(
        settings=settings,
        dataset_client=dataset_client,
        catalog_service=catalog_service,
        planner=planner,
        close_resources=close_resources,
    )
