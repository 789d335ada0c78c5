"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from food_lookup.api.models import (
    BudgetIn,
    BudgetOut,
    FilterOptionsResponse,
    FoodListResponse,
    FoodOut,
)
from food_lookup.api.shopping import router as shopping_router
from food_lookup.app_logging import configure_logging
from food_lookup.containers import AppContainer
from food_lookup.domain.errors import InvalidBudgetError
from food_lookup.domain.filters import FilterCriteria
from food_lookup.domain.foods import FoodView, Severity
from food_lookup.services.planner import PlannerSession


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        loaded = await app.state.container.planner.load_dataset()
        if not loaded:
            logger.warning("Starting without food data")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(shopping_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(  # noqa: PLR0913
        request: Request,
        name: str | None = None,
        category: str | None = None,
        carbs: str | None = None,
        calories: str | None = None,
        search: str | None = None,
        sort: str | None = None,
    ) -> FoodListResponse:
        """Filter, sort and classify the food collection."""
        planner: PlannerSession = request.app.state.container.planner
        criteria = FilterCriteria(
            name=name or None,
            category=category or None,
            carbs_band=carbs or None,
            calories_band=calories or None,
            search=search,
            sort=sort or planner.criteria.sort,
        )
        planner.apply_filters(criteria)
        return _food_list(planner)

    @app.get("/foods/options")
    async def filter_options(request: Request) -> FilterOptionsResponse:
        """Return values for the filter controls."""
        planner: PlannerSession = request.app.state.container.planner
        options = planner.filter_options()
        return FilterOptionsResponse(
            names=options.names,
            categories=options.categories,
            carbs_bands=options.carbs_bands,
            calories_bands=options.calories_bands,
            sort_options=options.sort_options,
        )

    @app.post("/dataset/reload")
    async def reload_dataset(request: Request) -> FoodListResponse:
        """Load the dataset again and return the current view."""
        planner: PlannerSession = request.app.state.container.planner
        await planner.load_dataset()
        return _food_list(planner)

    @app.get("/budget")
    async def get_budget(request: Request) -> BudgetOut:
        """Return the max daily carbs."""
        planner: PlannerSession = request.app.state.container.planner
        return BudgetOut(value=planner.budget)

    @app.put("/budget")
    async def set_budget(payload: BudgetIn, request: Request) -> BudgetOut:
        """Set or clear the max daily carbs."""
        planner: PlannerSession = request.app.state.container.planner
        try:
            value = planner.set_budget(payload.value)
        except InvalidBudgetError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return BudgetOut(value=value)

    return app


def _food_list(planner: PlannerSession) -> FoodListResponse:
    return FoodListResponse(
        foods=[
            _food_out(view, planner.is_listed(view.food.name))
            for view in planner.views()
        ],
        error=planner.load_error,
    )


def _food_out(view: FoodView, listed: bool) -> FoodOut:
    food = view.food
    return FoodOut(
        name=food.name,
        category=food.category,
        carbs=food.carbs,
        fat=food.fat,
        protein=food.protein,
        cholesterol=food.cholesterol,
        calories=food.calories,
        severity=None if view.severity is Severity.NONE else view.severity.value,
        listed=listed,
    )
