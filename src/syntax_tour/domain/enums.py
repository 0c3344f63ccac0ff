"""Type-safe domain enums for meals and output formats."""

from __future__ import annotations

from enum import Enum


class MealKind(str, Enum):
    """Meals the menu demonstration knows how to describe.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> MealKind.DINNER.value
        'dinner'
        >>> MealKind.LUNCH == "lunch"
        True
    """

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "MealKind",
    "OutputFormat",
]
