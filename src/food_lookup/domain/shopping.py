"""Domain models for the shopping list."""

import math
from dataclasses import dataclass

REFERENCE_GRAMS = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


@dataclass
class ShoppingListEntry:
    """Units of one food on the list and the multiplier applied to all of them."""

    count: int
    multiplier: float


@dataclass(frozen=True)
class ShoppingListItem:
    """Read-only view of a shopping list entry."""

    name: str
    count: int
    grams: int


@dataclass(frozen=True)
class ShoppingTotals:
    """Unrounded nutritional totals for the shopping list."""

    carbs: float
    calories: float
    fat: float

    def rounded(self) -> dict[str, int]:
        """Return totals rounded for display."""
        return {
            "carbs": round_half_up(self.carbs),
            "calories": round_half_up(self.calories),
            "fat": round_half_up(self.fat),
        }
