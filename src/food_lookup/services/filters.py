"""Filter and sort pipeline for the food collection."""

from collections.abc import Callable, Sequence

from food_lookup.domain.filters import FilterCriteria
from food_lookup.domain.foods import Food

MIN_SEARCH_LENGTH = 3

CARBS_BANDS: dict[str, Callable[[float], bool]] = {
    "very-low": lambda carbs: carbs < 10,
    "low": lambda carbs: 10 <= carbs < 20,
    "medium-low": lambda carbs: 20 <= carbs < 30,
    "medium": lambda carbs: 30 <= carbs < 40,
    "medium-high": lambda carbs: 40 <= carbs < 50,
    "high": lambda carbs: carbs >= 50,
}

CALORIES_BANDS: dict[str, Callable[[int], bool]] = {
    "low": lambda calories: calories < 200,
    "medium": lambda calories: 200 <= calories <= 500,
    "high": lambda calories: calories > 500,
}

# (key, descending)
SORT_OPTIONS: dict[str, tuple[Callable[[Food], object], bool]] = {
    "alphabetical": (lambda food: (food.name.casefold(), food.name), False),
    "carbs-high-low": (lambda food: food.carbs, True),
    "carbs-low-high": (lambda food: food.carbs, False),
    "calories-high-low": (lambda food: food.calories, True),
    "calories-low-high": (lambda food: food.calories, False),
    "fat-high-low": (lambda food: food.fat, True),
    "fat-low-high": (lambda food: food.fat, False),
}


def in_carbs_band(food: Food, band: str) -> bool:
    """Return True when the food's carbs fall into the band."""
    predicate = CARBS_BANDS.get(band)
    return predicate is None or predicate(food.carbs)


def in_calories_band(food: Food, band: str) -> bool:
    """Return True when the food's calories fall into the band."""
    predicate = CALORIES_BANDS.get(band)
    return predicate is None or predicate(food.calories)


def active_search_term(search: str | None) -> str | None:
    """Return the lower-cased search term when it is long enough to filter."""
    if not search:
        return None
    term = search.strip()
    if len(term) < MIN_SEARCH_LENGTH:
        return None
    return term.lower()


def _predicates(criteria: FilterCriteria) -> list[Callable[[Food], bool]]:
    predicates: list[Callable[[Food], bool]] = []
    if criteria.name:
        predicates.append(lambda food: food.name == criteria.name)
    if criteria.carbs_band:
        predicates.append(lambda food: in_carbs_band(food, criteria.carbs_band))
    if criteria.calories_band:
        predicates.append(lambda food: in_calories_band(food, criteria.calories_band))
    if criteria.category:
        predicates.append(lambda food: food.category == criteria.category)
    term = active_search_term(criteria.search)
    if term:
        predicates.append(lambda food: term in food.name.lower())
    return predicates


def sort_foods(foods: Sequence[Food], sort: str) -> list[Food]:
    """Return a stably sorted copy; unknown sort keys keep the input order."""
    option = SORT_OPTIONS.get(sort)
    if option is None:
        return list(foods)
    key, descending = option
    return sorted(foods, key=key, reverse=descending)


def apply_filters(foods: Sequence[Food], criteria: FilterCriteria) -> list[Food]:
    """Return foods matching every active predicate, sorted by the criteria."""
    predicates = _predicates(criteria)
    matches = [food for food in foods if all(check(food) for check in predicates)]
    return sort_foods(matches, criteria.sort)
