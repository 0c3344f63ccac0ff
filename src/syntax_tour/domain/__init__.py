"""Domain layer - pure logic with no I/O or framework dependencies.

Contents:
    * :mod:`.menu` - Menu demonstration (breakfast, lunch, dinner lines)
    * :mod:`.player` - Nested field extraction from player records
    * :mod:`.enums` - Domain enumerations (MealKind, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import MealKind, OutputFormat
from .errors import ConfigurationError, InvalidArgumentError, MissingFieldError, RecordShapeError
from .menu import (
    DEFAULT_DINNER_FOOD,
    breakfast_menu,
    describe_meal,
    dinner_menu,
    lunch_menu,
)
from .player import (
    DEFAULT_PLAYER,
    Address,
    Player,
    PlayerFields,
    describe_club,
    describe_residence,
    extract_player_fields,
)

__all__ = [
    # Menu
    "DEFAULT_DINNER_FOOD",
    "breakfast_menu",
    "describe_meal",
    "dinner_menu",
    "lunch_menu",
    # Player
    "DEFAULT_PLAYER",
    "Address",
    "Player",
    "PlayerFields",
    "describe_club",
    "describe_residence",
    "extract_player_fields",
    # Enums
    "MealKind",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
    "MissingFieldError",
    "RecordShapeError",
]
