"""Composition root: the two ways of wiring the ports together.

``build_production`` reads layered configuration from disk and starts
lib_log_rich. ``build_testing`` serves configuration from a dict and never
starts logging. Section loading is pure, so both use the same loaders and
therefore raise the same ``ConfigurationError`` for a malformed section.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.sections import load_menu_config_from_dict, load_player_record_from_dict
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadMenuConfigFromDict,
        LoadPlayerRecordFromDict,
    )

    _get_config: GetConfig = get_config
    _display_config: DisplayConfig = display_config
    _load_menu_config: LoadMenuConfigFromDict = load_menu_config_from_dict
    _load_player_record: LoadPlayerRecordFromDict = load_player_record_from_dict
    _init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Everything a command may call that is not pure domain logic."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_menu_config: LoadMenuConfigFromDict
    load_player_record: LoadPlayerRecordFromDict
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services reading real configuration files and logging through lib_log_rich."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_menu_config=load_menu_config_from_dict,
        load_player_record=load_player_record_from_dict,
        init_logging=init_logging,
    )


def build_testing(config_data: Mapping[str, Any] | None = None) -> AppServices:
    """Services whose configuration is exactly ``config_data``.

    ``get_config`` is an :class:`~syntax_tour.adapters.memory.InMemoryConfig`
    and ``init_logging`` a :class:`~syntax_tour.adapters.memory.RecordingLogInit`,
    so tests can inspect requested profiles and the config logging received.

    Example:
        >>> services = build_testing({"menu": {"dinner_food": "soup"}})
        >>> services.load_menu_config(services.get_config().as_dict()).dinner_food
        'soup'
    """
    from ..adapters.memory import InMemoryConfig, RecordingLogInit, display_config_in_memory

    return AppServices(
        get_config=InMemoryConfig(config_data),
        display_config=display_config_in_memory,
        load_menu_config=load_menu_config_from_dict,
        load_player_record=load_player_record_from_dict,
        init_logging=RecordingLogInit(),
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
