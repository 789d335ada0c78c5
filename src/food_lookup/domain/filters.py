"""Domain models for filtering and sorting foods."""

from dataclasses import dataclass

DEFAULT_SORT = "alphabetical"


@dataclass(frozen=True)
class FilterCriteria:
    """Optional predicates and a sort key applied to the food collection."""

    name: str | None = None
    category: str | None = None
    carbs_band: str | None = None
    calories_band: str | None = None
    search: str | None = None
    sort: str = DEFAULT_SORT


@dataclass(frozen=True)
class FilterOptions:
    """Values available for building filter controls."""

    names: list[str]
    categories: list[str]
    carbs_bands: list[str]
    calories_bands: list[str]
    sort_options: list[str]
