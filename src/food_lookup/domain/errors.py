"""Domain errors."""


class FoodLookupError(Exception):
    """Base error for the food lookup core."""


class DatasetLoadError(FoodLookupError):
    """Raised when the food dataset cannot be fetched or decoded."""


class DatasetFormatError(DatasetLoadError):
    """Raised when a structured dataset payload has the wrong shape."""


class InvalidBudgetError(FoodLookupError):
    """Raised when a daily carbs budget input is not a non-negative integer."""


class UnknownFoodError(FoodLookupError):
    """Raised when a food name is not present in the loaded collection."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown food: {name}")
        self.name = name
