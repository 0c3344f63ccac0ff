"""Menu stories: the three meal functions and the dinner coercion policy."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from syntax_tour.domain import menu
from syntax_tour.domain.enums import MealKind
from syntax_tour.domain.errors import InvalidArgumentError


@pytest.mark.os_agnostic
def test_breakfast_menu_returns_fixed_line() -> None:
    assert menu.breakfast_menu() == "I'm going to scrambled eggs for breakfast"


@pytest.mark.os_agnostic
def test_lunch_menu_returns_fixed_line() -> None:
    assert menu.lunch_menu() == "I'm going to eat pizza for lunch"


@pytest.mark.os_agnostic
def test_breakfast_and_lunch_are_idempotent_and_independent() -> None:
    """Repeated and interleaved calls always yield the same lines."""
    first_breakfast = menu.breakfast_menu()
    first_lunch = menu.lunch_menu()

    for _ in range(3):
        assert menu.lunch_menu() == first_lunch
        assert menu.breakfast_menu() == first_breakfast


@pytest.mark.os_agnostic
def test_lunch_menu_is_a_lambda() -> None:
    """lunch_menu is declared as an unnamed function bound to a name."""
    assert menu.lunch_menu.__name__ == "<lambda>"
    assert menu.breakfast_menu.__name__ == "breakfast_menu"


@pytest.mark.os_agnostic
def test_dinner_menu_interpolates_chicken_salad() -> None:
    assert menu.dinner_menu("chicken salad") == "I'm going to eat a chicken salad for dinner"


@pytest.mark.os_agnostic
def test_dinner_menu_interpolates_tofu_steak() -> None:
    assert menu.dinner_menu("tofu steak") == "I'm going to eat a tofu steak for dinner"


@pytest.mark.os_agnostic
def test_dinner_menu_inserts_text_verbatim() -> None:
    """No escaping or trimming happens around the food."""
    assert menu.dinner_menu("  {food} & <b>") == "I'm going to eat a   {food} & <b> for dinner"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("food", "expected"),
    [
        (2, "I'm going to eat a 2 for dinner"),
        (1.5, "I'm going to eat a 1.5 for dinner"),
    ],
)
def test_dinner_menu_renders_plain_numbers(food: float, expected: str) -> None:
    assert menu.dinner_menu(food) == expected  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("food", [None, True, ["rice"], {"dish": "rice"}, object()])
def test_dinner_menu_rejects_values_that_are_not_text(food: object) -> None:
    with pytest.raises(InvalidArgumentError, match="food must be text or a number"):
        menu.dinner_menu(food)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@given(food=st.text())
def test_dinner_menu_matches_template_for_any_text(food: str) -> None:
    assert menu.dinner_menu(food) == "I'm going to eat a " + food + " for dinner"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (MealKind.BREAKFAST, "I'm going to scrambled eggs for breakfast"),
        (MealKind.LUNCH, "I'm going to eat pizza for lunch"),
        (MealKind.DINNER, "I'm going to eat a chicken salad for dinner"),
    ],
)
def test_describe_meal_dispatches_on_kind(kind: MealKind, expected: str) -> None:
    assert menu.describe_meal(kind) == expected


@pytest.mark.os_agnostic
def test_describe_meal_ignores_food_outside_dinner() -> None:
    assert menu.describe_meal(MealKind.LUNCH, "tofu steak") == menu.LUNCH_LINE
