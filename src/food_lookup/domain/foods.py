"""Food domain models."""

from dataclasses import dataclass
from enum import Enum

TRACE_AMOUNT = 0.1


@dataclass(frozen=True)
class Food:
    """Nutrition values for a food, per 100g reference serving."""

    name: str
    category: str
    carbs: float
    fat: float
    protein: float
    cholesterol: float
    calories: int

    def has_nutrients(self) -> bool:
        """Return True when at least one macro or calorie value is positive."""
        return (
            self.protein > 0 or self.fat > 0 or self.carbs > 0 or self.calories > 0
        )


class Severity(Enum):
    """Classification of a food against the daily carbs budget."""

    NONE = "none"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


@dataclass(frozen=True)
class FoodView:
    """A visible food paired with its current classification."""

    food: Food
    severity: Severity
