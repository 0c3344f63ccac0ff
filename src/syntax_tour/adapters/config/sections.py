"""Typed access to the ``[menu]`` and ``[player]`` configuration sections.

Bridges lib_layered_config's dictionary output with the domain: the menu
section is validated once at the boundary with a Pydantic model, the player
section is handed to the domain extraction as a plain mapping so missing
fields surface as :class:`MissingFieldError` rather than a validation report.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError

from syntax_tour.domain.errors import ConfigurationError
from syntax_tour.domain.menu import DEFAULT_DINNER_FOOD
from syntax_tour.domain.player import DEFAULT_PLAYER, Player


class MenuConfig(BaseModel):
    """Validated, immutable ``[menu]`` settings.

    Numbers are accepted and turned into text, matching the coercion policy
    of :func:`syntax_tour.domain.menu.dinner_menu`.

    Example:
        >>> MenuConfig().dinner_food
        'chicken salad'
        >>> MenuConfig(dinner_food=3).dinner_food
        '3'
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    dinner_food: str = DEFAULT_DINNER_FOOD


def load_menu_config_from_dict(config_dict: Mapping[str, Any]) -> MenuConfig:
    """Load MenuConfig from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            The ``menu`` section is optional.

    Returns:
        Menu settings with defaults for missing values.

    Raises:
        ConfigurationError: When the section holds values of the wrong type.

    Example:
        >>> load_menu_config_from_dict({"menu": {"dinner_food": "tofu steak"}}).dinner_food
        'tofu steak'
        >>> load_menu_config_from_dict({}).dinner_food
        'chicken salad'
    """
    menu_raw = config_dict.get("menu", {})
    try:
        return MenuConfig.model_validate(menu_raw if menu_raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [menu] configuration: {exc}") from exc


def load_player_record_from_dict(config_dict: Mapping[str, Any]) -> Player | Mapping[str, object]:
    """Return the ``[player]`` section, or :data:`DEFAULT_PLAYER` when absent.

    A present but incomplete section is returned unchanged; completeness is
    checked by the extraction itself.

    Raises:
        ConfigurationError: When ``player`` is not a table.

    Example:
        >>> load_player_record_from_dict({}) is DEFAULT_PLAYER
        True
        >>> load_player_record_from_dict({"player": {"club": "X"}})
        {'club': 'X'}
    """
    player_raw = config_dict.get("player")
    if player_raw is None:
        return DEFAULT_PLAYER
    if not isinstance(player_raw, Mapping):
        raise ConfigurationError(f"[player] must be a table, got {type(player_raw).__name__}")
    return cast("Mapping[str, object]", player_raw)


__all__ = [
    "MenuConfig",
    "load_menu_config_from_dict",
    "load_player_record_from_dict",
]
