"""In-memory stand-ins for the I/O-bound ports.

Only configuration discovery, configuration display and logging start-up
touch the outside world; section loading is pure and is wired as-is by
:func:`syntax_tour.composition.build_testing`.

Contents:
    * :class:`.config.InMemoryConfig` - ``GetConfig`` over a fixed dict
    * :func:`.config.display_config_in_memory` - plain-text ``DisplayConfig``
    * :class:`.logging.RecordingLogInit` - ``InitLogging`` that only records
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import InMemoryConfig, display_config_in_memory
from .logging import RecordingLogInit

if TYPE_CHECKING:
    from syntax_tour.application.ports import DisplayConfig, GetConfig, InitLogging

    _get_config: GetConfig = InMemoryConfig()
    _display_config: DisplayConfig = display_config_in_memory
    _init_logging: InitLogging = RecordingLogInit()

__all__ = [
    "InMemoryConfig",
    "RecordingLogInit",
    "display_config_in_memory",
]
