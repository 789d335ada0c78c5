"""Pydantic models for API payloads."""

from pydantic import BaseModel


class FoodOut(BaseModel):
    """A visible food with its carbs budget classification."""

    name: str
    category: str
    carbs: float
    fat: float
    protein: float
    cholesterol: float
    calories: int
    severity: str | None = None
    listed: bool = False


class FoodListResponse(BaseModel):
    """Filtered foods, or the load error when the dataset is unavailable."""

    foods: list[FoodOut]
    error: str | None = None


class FilterOptionsResponse(BaseModel):
    """Choices for building filter controls."""

    names: list[str]
    categories: list[str]
    carbs_bands: list[str]
    calories_bands: list[str]
    sort_options: list[str]


class BudgetIn(BaseModel):
    """Max daily carbs input; null or blank clears it."""

    value: str | int | None = None


class BudgetOut(BaseModel):
    """Current max daily carbs."""

    value: int | None


class ShoppingItemIn(BaseModel):
    """Food name and gram quantity for a shopping list change."""

    name: str
    grams: float | None = None


class ShoppingItemOut(BaseModel):
    """Shopping list entry as displayed."""

    name: str
    count: int
    grams: int


class TotalsOut(BaseModel):
    """Rounded shopping list totals."""

    carbs: int
    calories: int
    fat: int


class ShoppingListResponse(BaseModel):
    """Shopping list contents with totals."""

    items: list[ShoppingItemOut]
    totals: TotalsOut
