"""Tests for the shopping list aggregator."""

import pytest

from food_lookup.domain.shopping import ShoppingListItem, ShoppingTotals
from food_lookup.services.shopping import ShoppingList
from tests.conftest import make_food

BREAD = make_food("Bread", carbs=46.1, fat=1.9, calories=235)
CHEESE = make_food("Cheese", carbs=1.3, fat=33, calories=403)


def test_add_creates_then_increments_and_overwrites_multiplier() -> None:
    shopping = ShoppingList()

    shopping.add(BREAD, 1.0)
    entry = shopping.add(BREAD, 1.5)

    assert entry.count == 2
    assert entry.multiplier == 1.5
    assert len(shopping) == 1


def test_add_twice_rescales_every_unit() -> None:
    shopping = ShoppingList()

    shopping.add(BREAD, 1.5)
    shopping.add(BREAD, 1.5)
    totals = shopping.compute_totals([BREAD])

    assert totals.carbs == BREAD.carbs * 1.5 * 2
    assert totals.calories == BREAD.calories * 1.5 * 2
    assert totals.fat == BREAD.fat * 1.5 * 2


def test_add_then_remove_restores_absence() -> None:
    shopping = ShoppingList()

    shopping.add(CHEESE, 2.0)
    removed = shopping.remove(CHEESE, 2.0)

    assert removed is None
    assert "Cheese" not in shopping
    assert shopping.items() == []


def test_remove_decrements_without_touching_multiplier() -> None:
    shopping = ShoppingList()
    shopping.add(BREAD, 1.0)
    shopping.add(BREAD, 0.5)

    entry = shopping.remove(BREAD, 3.0)

    assert entry is not None
    assert entry.count == 1
    assert entry.multiplier == 0.5


def test_remove_absent_is_noop() -> None:
    shopping = ShoppingList()
    shopping.add(BREAD)

    assert shopping.remove(CHEESE) is None
    assert shopping.items() == [ShoppingListItem(name="Bread", count=1, grams=100)]


def test_remove_name_needs_no_food_record() -> None:
    shopping = ShoppingList()
    shopping.add(BREAD)
    shopping.add(BREAD)

    entry = shopping.remove_name("Bread")

    assert entry is not None
    assert entry.count == 1
    assert shopping.remove_name("Bread") is None
    assert "Bread" not in shopping
    assert shopping.remove_name("Bread") is None


def test_set_multiplier_only_changes_existing_entries() -> None:
    shopping = ShoppingList()
    shopping.add(BREAD)
    shopping.add(BREAD)

    assert shopping.set_multiplier("Bread", 2.5)
    assert not shopping.set_multiplier("Cheese", 2.5)
    entry = shopping.entry("Bread")
    assert entry is not None
    assert entry.count == 2
    assert entry.multiplier == 2.5
    assert "Cheese" not in shopping


def test_non_positive_multiplier_is_rejected() -> None:
    shopping = ShoppingList()

    with pytest.raises(ValueError, match="positive"):
        shopping.add(BREAD, 0)
    assert "Bread" not in shopping


def test_reset_clears_everything() -> None:
    shopping = ShoppingList()
    shopping.add(BREAD, 1.2)
    shopping.add(CHEESE, 0.3)

    shopping.reset()

    assert len(shopping) == 0
    assert shopping.compute_totals([BREAD, CHEESE]) == ShoppingTotals(
        carbs=0.0, calories=0.0, fat=0.0
    )


def test_missing_foods_contribute_nothing() -> None:
    shopping = ShoppingList()
    shopping.add(BREAD, 1.0)
    shopping.add(CHEESE, 1.0)

    totals = shopping.compute_totals([CHEESE])

    assert totals.carbs == CHEESE.carbs
    assert totals.calories == CHEESE.calories


def test_totals_use_last_food_with_a_name() -> None:
    shopping = ShoppingList()
    shopping.add(make_food("Dup", carbs=1.0))

    totals = shopping.compute_totals(
        [make_food("Dup", carbs=1.0), make_food("Dup", carbs=5.0)]
    )

    assert totals.carbs == 5.0


def test_items_report_grams_and_insertion_order() -> None:
    shopping = ShoppingList()
    shopping.add(CHEESE, 0.255)
    shopping.add(BREAD, 1.5)
    shopping.add(CHEESE, 0.255)

    assert shopping.items() == [
        ShoppingListItem(name="Cheese", count=2, grams=26),
        ShoppingListItem(name="Bread", count=1, grams=150),
    ]


def test_rounded_totals_round_half_up() -> None:
    totals = ShoppingTotals(carbs=2.5, calories=402.49, fat=0.5)

    assert totals.rounded() == {"carbs": 3, "calories": 402, "fat": 1}
