"""Shopping list API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from food_lookup.api.models import (
    ShoppingItemIn,
    ShoppingItemOut,
    ShoppingListResponse,
    TotalsOut,
)
from food_lookup.domain.errors import UnknownFoodError

if TYPE_CHECKING:
    from food_lookup.containers import AppContainer
    from food_lookup.services.planner import PlannerSession

router = APIRouter(prefix="/shopping-list", tags=["shopping-list"])


def _planner(request: Request) -> PlannerSession:
    container: AppContainer = request.app.state.container
    return container.planner


def shopping_list_response(planner: PlannerSession) -> ShoppingListResponse:
    """Render the shopping list and its rounded totals."""
    return ShoppingListResponse(
        items=[
            ShoppingItemOut(name=item.name, count=item.count, grams=item.grams)
            for item in planner.shopping_list()
        ],
        totals=TotalsOut(**planner.get_totals().rounded()),
    )


@router.get("")
async def get_shopping_list(request: Request) -> ShoppingListResponse:
    """Return the shopping list with totals."""
    return shopping_list_response(_planner(request))


@router.post("/items")
async def add_item(payload: ShoppingItemIn, request: Request) -> ShoppingListResponse:
    """Add one unit of a food."""
    planner = _planner(request)
    try:
        planner.add_item(payload.name, payload.grams)
    except UnknownFoodError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return shopping_list_response(planner)


@router.post("/items/remove")
async def remove_item(
    payload: ShoppingItemIn, request: Request
) -> ShoppingListResponse:
    """Remove one unit of a food."""
    planner = _planner(request)
    try:
        planner.remove_item(payload.name, payload.grams)
    except UnknownFoodError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return shopping_list_response(planner)


@router.put("/items")
async def set_item_quantity(
    payload: ShoppingItemIn, request: Request
) -> ShoppingListResponse:
    """Change the gram quantity of a listed food."""
    planner = _planner(request)
    planner.set_item_quantity(payload.name, payload.grams)
    return shopping_list_response(planner)


@router.delete("")
async def reset_shopping_list(request: Request) -> ShoppingListResponse:
    """Empty the shopping list."""
    planner = _planner(request)
    planner.reset_list()
    return shopping_list_response(planner)
