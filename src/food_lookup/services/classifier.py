"""Classification of foods against a daily carbs budget."""

from food_lookup.domain.foods import Food, Severity

WARNING_MARGIN = 1.2


def classify(food: Food, budget: int | None) -> Severity:
    """Classify a food: red over budget, orange within 20% of it, else green."""
    if budget is None:
        return Severity.NONE
    if budget < food.carbs:
        return Severity.RED
    if budget < food.carbs * WARNING_MARGIN:
        return Severity.ORANGE
    return Severity.GREEN
