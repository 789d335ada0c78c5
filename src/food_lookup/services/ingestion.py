"""Parsing of tabular and structured food datasets into Food records."""

import logging
import re
from collections.abc import Iterable

from pydantic import (
    BaseModel,
    NonNegativeFloat,
    NonNegativeInt,
    TypeAdapter,
    ValidationError,
)

from food_lookup.domain.errors import DatasetFormatError
from food_lookup.domain.foods import TRACE_AMOUNT, Food

DEFAULT_HEADER_LINES = 3
MIN_FIELDS = 9

_NAME_FIELD = 0
_PROTEIN_FIELD = 1
_FAT_FIELD = 2
_CARBS_FIELD = 3
_CALORIES_FIELD = 4
_CHOLESTEROL_FIELD = 7
_CATEGORY_FIELD = 8

_SENTINEL_TOKENS = {"Tr", "N"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_logger = logging.getLogger(__name__)


class FoodRecord(BaseModel):
    """Typed food record from a structured dataset."""

    name: str
    category: str
    carbs: NonNegativeFloat
    fat: NonNegativeFloat
    protein: NonNegativeFloat
    cholesterol: NonNegativeFloat = 0.0
    calories: NonNegativeInt


_FOOD_RECORDS = TypeAdapter(list[FoodRecord])


def parse_csv_line(line: str) -> list[str]:
    """Split a CSV line on commas, honoring double-quoted fields."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == '"':
            if in_quotes and line[index + 1 : index + 2] == '"':
                current.append('"')
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    fields.append("".join(current))
    return fields


def parse_nutrient(token: str) -> float:
    """Parse a nutrient value; trace and unavailable markers become 0.1."""
    if token in _SENTINEL_TOKENS:
        return TRACE_AMOUNT
    match = _LEADING_FLOAT.match(token)
    if match is None:
        return 0.0
    return float(match.group(1))


def parse_calories(token: str) -> int:
    """Parse the leading integer of a calories value, or 0."""
    match = _LEADING_INT.match(token)
    if match is None:
        return 0
    return int(match.group(1))


def _clean_text(value: str) -> str:
    return value.replace('"', "").strip()


def parse_food_line(line: str) -> Food | None:
    """Parse one data line into a Food, or None when it is unusable."""
    fields = parse_csv_line(line)
    if len(fields) < MIN_FIELDS:
        return None
    food = Food(
        name=_clean_text(fields[_NAME_FIELD]),
        category=_clean_text(fields[_CATEGORY_FIELD]),
        carbs=parse_nutrient(fields[_CARBS_FIELD]),
        fat=parse_nutrient(fields[_FAT_FIELD]),
        protein=parse_nutrient(fields[_PROTEIN_FIELD]),
        cholesterol=parse_nutrient(fields[_CHOLESTEROL_FIELD]),
        calories=parse_calories(fields[_CALORIES_FIELD]),
    )
    if not food.name or not food.has_nutrients():
        return None
    return food


def parse_foods_csv(text: str, header_lines: int = DEFAULT_HEADER_LINES) -> list[Food]:
    """Parse CSV dataset text, skipping the fixed header block."""
    lines = _LINE_BREAK.split(text)
    foods: list[Food] = []
    skipped = 0
    for raw_line in lines[header_lines:]:
        line = raw_line.strip()
        if not line:
            continue
        food = parse_food_line(line)
        if food is None:
            skipped += 1
            continue
        foods.append(food)
    _logger.debug("Parsed CSV dataset: foods=%s skipped=%s", len(foods), skipped)
    return foods


def foods_from_records(records: object) -> list[Food]:
    """Build foods from an already typed list of records."""
    try:
        parsed = _FOOD_RECORDS.validate_python(records)
    except ValidationError as exc:
        raise DatasetFormatError(f"Malformed food records: {exc}") from exc
    return list(_keep_nutritious(_to_food(record) for record in parsed))


def _to_food(record: FoodRecord) -> Food:
    return Food(
        name=record.name,
        category=record.category,
        carbs=record.carbs,
        fat=record.fat,
        protein=record.protein,
        cholesterol=record.cholesterol,
        calories=record.calories,
    )


def _keep_nutritious(foods: Iterable[Food]) -> Iterable[Food]:
    return (food for food in foods if food.name and food.has_nutrients())
