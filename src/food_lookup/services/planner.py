"""Planner session holding the dataset, budget, filters and shopping list."""

import logging
import re
from dataclasses import dataclass

from food_lookup.domain.errors import (
    DatasetLoadError,
    InvalidBudgetError,
    UnknownFoodError,
)
from food_lookup.domain.filters import DEFAULT_SORT, FilterCriteria, FilterOptions
from food_lookup.domain.foods import Food, FoodView, Severity
from food_lookup.domain.shopping import (
    REFERENCE_GRAMS,
    ShoppingListEntry,
    ShoppingListItem,
    ShoppingTotals,
)
from food_lookup.services.catalog import CatalogService
from food_lookup.services.classifier import classify
from food_lookup.services.filters import (
    CALORIES_BANDS,
    CARBS_BANDS,
    SORT_OPTIONS,
    apply_filters,
)
from food_lookup.services.shopping import ShoppingList

LOAD_FAILURE_MESSAGE = "Failed to load food data. Please check the logs for details."
BUDGET_PROMPT = "Please enter a valid positive number for max daily carbs."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_logger = logging.getLogger(__name__)


def parse_budget(value: str | int | None) -> int | None:
    """Parse a max daily carbs input; blank clears it, junk is rejected."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidBudgetError(BUDGET_PROMPT)
    if isinstance(value, int):
        parsed = value
    else:
        cleaned = value.strip()
        if not cleaned:
            return None
        match = _LEADING_INT.match(cleaned)
        if match is None:
            raise InvalidBudgetError(BUDGET_PROMPT)
        parsed = int(match.group(1))
    if parsed < 0:
        raise InvalidBudgetError(BUDGET_PROMPT)
    return parsed


def grams_to_multiplier(grams: str | float | None) -> float:
    """Convert a gram quantity to a 100g multiplier, defaulting to 100g."""
    quantity: float = 0
    if isinstance(grams, str):
        match = _LEADING_INT.match(grams)
        if match is not None:
            quantity = int(match.group(1))
    elif grams is not None:
        quantity = grams
    if quantity <= 0:
        quantity = REFERENCE_GRAMS
    return quantity / REFERENCE_GRAMS


@dataclass
class PlannerSession:
    """Single-user state for browsing foods and building a shopping list.

    Every change to the visible foods or the budget ends with one
    reclassification pass, so `views()` always reflects both.
    """

    catalog: CatalogService
    load_error: str | None
    _foods: list[Food]
    _index: dict[str, Food]
    _budget: int | None
    _criteria: FilterCriteria
    _views: list[FoodView]
    _shopping_list: ShoppingList

    def __init__(
        self, catalog: CatalogService, default_sort: str = DEFAULT_SORT
    ) -> None:
        self.catalog = catalog
        self.load_error = None
        self._foods = []
        self._index = {}
        self._budget = None
        self._criteria = FilterCriteria(sort=default_sort)
        self._views = []
        self._shopping_list = ShoppingList()

    @property
    def foods(self) -> tuple[Food, ...]:
        """The loaded food collection."""
        return tuple(self._foods)

    @property
    def budget(self) -> int | None:
        """The current max daily carbs, or None when unset."""
        return self._budget

    @property
    def criteria(self) -> FilterCriteria:
        """The criteria used for the current visible set."""
        return self._criteria

    async def load_dataset(self) -> bool:
        """Load the dataset; on failure the collection is left empty."""
        try:
            foods = await self.catalog.load()
        except DatasetLoadError:
            _logger.exception("Error loading food data")
            self.load_error = LOAD_FAILURE_MESSAGE
            self._replace_foods([])
            return False
        self.load_error = None
        self._replace_foods(foods)
        return True

    def apply_filters(self, criteria: FilterCriteria | None = None) -> list[Food]:
        """Filter and sort the collection, then reclassify the result."""
        if criteria is not None:
            self._criteria = criteria
        visible = apply_filters(self._foods, self._criteria)
        self._reclassify(visible)
        return visible

    def classify(self, food: Food) -> Severity:
        """Classify a food against the current budget."""
        return classify(food, self._budget)

    def set_budget(self, value: str | int | None) -> int | None:
        """Set or clear the budget; invalid input keeps the previous value."""
        self._budget = parse_budget(value)
        if self._budget is None:
            _logger.info("Max daily carbs cleared")
        else:
            _logger.info("Max daily carbs set to: %sg", self._budget)
        self._reclassify([view.food for view in self._views])
        return self._budget

    def views(self) -> list[FoodView]:
        """Return the visible foods with their classifications."""
        return list(self._views)

    def filter_options(self) -> FilterOptions:
        """Return sorted unique names and categories plus known keys."""
        return FilterOptions(
            names=sorted({food.name for food in self._foods}),
            categories=sorted({food.category for food in self._foods}),
            carbs_bands=list(CARBS_BANDS),
            calories_bands=list(CALORIES_BANDS),
            sort_options=list(SORT_OPTIONS),
        )

    def find_food(self, name: str) -> Food | None:
        """Return the food with this exact name, if loaded."""
        return self._index.get(name)

    def add_item(
        self, name: str, grams: str | float | None = None
    ) -> ShoppingListEntry:
        """Add one unit of a food at the given gram quantity."""
        food = self._require_food(name)
        entry = self._shopping_list.add(food, grams_to_multiplier(grams))
        _logger.info(
            "Added %s to shopping list (count: %s, multiplier: %s)",
            name,
            entry.count,
            entry.multiplier,
        )
        return entry

    def remove_item(
        self, name: str, grams: str | float | None = None
    ) -> ShoppingListEntry | None:
        """Remove one unit of a food from the shopping list.

        The gram quantity is ignored. Listed names are removed even when a
        reload no longer has the food.
        """
        if name not in self._shopping_list:
            self._require_food(name)
            return None
        entry = self._shopping_list.remove_name(name)
        _logger.info("Removed %s from shopping list", name)
        return entry

    def set_item_quantity(self, name: str, grams: str | float | None) -> bool:
        """Change the gram quantity of a listed food."""
        return self._shopping_list.set_multiplier(name, grams_to_multiplier(grams))

    def reset_list(self) -> None:
        """Empty the shopping list."""
        self._shopping_list.reset()
        _logger.info("Shopping list reset")

    def is_listed(self, name: str) -> bool:
        """Return True when the food has units on the shopping list."""
        return name in self._shopping_list

    def shopping_list(self) -> list[ShoppingListItem]:
        """Return the shopping list contents."""
        return self._shopping_list.items()

    def get_totals(self) -> ShoppingTotals:
        """Return weighted totals for the shopping list."""
        return self._shopping_list.compute_totals(self._foods)

    def _require_food(self, name: str) -> Food:
        food = self._index.get(name)
        if food is None:
            raise UnknownFoodError(name)
        return food

    def _replace_foods(self, foods: list[Food]) -> None:
        self._foods = list(foods)
        self._index = {food.name: food for food in self._foods}
        self.apply_filters()

    def _reclassify(self, visible: list[Food]) -> None:
        self._views = [
            FoodView(food=food, severity=self.classify(food)) for food in visible
        ]
