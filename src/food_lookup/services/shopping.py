"""Shopping list aggregation with per-food gram multipliers."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from food_lookup.domain.foods import Food
from food_lookup.domain.shopping import (
    REFERENCE_GRAMS,
    ShoppingListEntry,
    ShoppingListItem,
    ShoppingTotals,
    round_half_up,
)


def _check_multiplier(multiplier: float) -> None:
    if multiplier <= 0:
        raise ValueError(f"Multiplier must be positive, got {multiplier}")


@dataclass
class ShoppingList:
    """Mapping of food name to units on the list.

    The multiplier stored for an entry applies to every unit of it, so a new
    multiplier rescales units that were added earlier.
    """

    _entries: dict[str, ShoppingListEntry] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, name: str) -> ShoppingListEntry | None:
        """Return the entry for a food name, if present."""
        return self._entries.get(name)

    def add(self, food: Food, multiplier: float = 1.0) -> ShoppingListEntry:
        """Add one unit of a food and set the entry's multiplier."""
        _check_multiplier(multiplier)
        entry = self._entries.get(food.name)
        if entry is None:
            entry = ShoppingListEntry(count=1, multiplier=multiplier)
            self._entries[food.name] = entry
        else:
            entry.count += 1
            entry.multiplier = multiplier
        return entry

    def remove(self, food: Food, multiplier: float = 1.0) -> ShoppingListEntry | None:
        """Remove one unit of a food; the multiplier is left untouched."""
        return self.remove_name(food.name)

    def remove_name(self, name: str) -> ShoppingListEntry | None:
        """Remove one unit by name, whether or not the food is still loaded."""
        entry = self._entries.get(name)
        if entry is None:
            return None
        if entry.count > 1:
            entry.count -= 1
            return entry
        del self._entries[name]
        return None

    def set_multiplier(self, name: str, multiplier: float) -> bool:
        """Overwrite the multiplier of an existing entry."""
        _check_multiplier(multiplier)
        entry = self._entries.get(name)
        if entry is None:
            return False
        entry.multiplier = multiplier
        return True

    def reset(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def items(self) -> list[ShoppingListItem]:
        """Return entries in the order they were first added."""
        return [
            ShoppingListItem(
                name=name,
                count=entry.count,
                grams=round_half_up(entry.multiplier * REFERENCE_GRAMS),
            )
            for name, entry in self._entries.items()
        ]

    def compute_totals(self, foods: Iterable[Food]) -> ShoppingTotals:
        """Sum weighted carbs, calories and fat over the reference foods."""
        index = {food.name: food for food in foods}
        carbs = 0.0
        calories = 0.0
        fat = 0.0
        for name, entry in self._entries.items():
            food = index.get(name)
            if food is None:
                continue
            carbs += food.carbs * entry.multiplier * entry.count
            calories += food.calories * entry.multiplier * entry.count
            fat += food.fat * entry.multiplier * entry.count
        return ShoppingTotals(carbs=carbs, calories=calories, fat=fat)
