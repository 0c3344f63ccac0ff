"""Menu demonstration: three ways of producing a line of text from a function.

``breakfast_menu`` is an ordinary ``def``, ``lunch_menu`` is a lambda bound to
a name and ``dinner_menu`` interpolates its argument into a template. The first
two are interchangeable; only the declaration style differs.
"""

from __future__ import annotations

from collections.abc import Callable

from .enums import MealKind
from .errors import InvalidArgumentError

BREAKFAST_LINE = "I'm going to scrambled eggs for breakfast"
LUNCH_LINE = "I'm going to eat pizza for lunch"
DINNER_TEMPLATE = "I'm going to eat a {food} for dinner"
DEFAULT_DINNER_FOOD = "chicken salad"


def breakfast_menu() -> str:
    """Return the fixed breakfast line.

    Example:
        >>> breakfast_menu()
        "I'm going to scrambled eggs for breakfast"
    """
    return BREAKFAST_LINE


lunch_menu: Callable[[], str] = lambda: LUNCH_LINE  # noqa: E731


def _as_text(food: object) -> str:
    """Render ``food`` as text: strings verbatim, plain numbers via ``str()``."""
    if isinstance(food, str):
        return food
    # bool is an int subclass but "a True for dinner" is never intended
    if isinstance(food, (int, float)) and not isinstance(food, bool):
        return str(food)
    raise InvalidArgumentError(f"food must be text or a number, got {type(food).__name__}")


def dinner_menu(food: str) -> str:
    """Return the dinner line with ``food`` interpolated.

    Strings are inserted verbatim with no escaping or trimming. Integers and
    floats are accepted and rendered with ``str()``; anything else is refused.

    Args:
        food: What is for dinner.

    Returns:
        ``"I'm going to eat a {food} for dinner"``.

    Raises:
        InvalidArgumentError: When ``food`` is not text or a plain number.

    Example:
        >>> dinner_menu("chicken salad")
        "I'm going to eat a chicken salad for dinner"
        >>> dinner_menu(2)
        "I'm going to eat a 2 for dinner"
    """
    return DINNER_TEMPLATE.format(food=_as_text(food))


def describe_meal(kind: MealKind, food: str = DEFAULT_DINNER_FOOD) -> str:
    """Return the line for ``kind``; ``food`` only matters for dinner.

    Example:
        >>> describe_meal(MealKind.LUNCH)
        "I'm going to eat pizza for lunch"
        >>> describe_meal(MealKind.DINNER, "tofu steak")
        "I'm going to eat a tofu steak for dinner"
    """
    if kind == MealKind.BREAKFAST:
        return breakfast_menu()
    if kind == MealKind.LUNCH:
        return lunch_menu()
    return dinner_menu(food)


__all__ = [
    "BREAKFAST_LINE",
    "DEFAULT_DINNER_FOOD",
    "DINNER_TEMPLATE",
    "LUNCH_LINE",
    "breakfast_menu",
    "describe_meal",
    "dinner_menu",
    "lunch_menu",
]
