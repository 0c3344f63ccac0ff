"""Callable ports the CLI depends on.

A port is a Protocol with only ``__call__``; plain functions and callable
objects both satisfy it. The production adapters live in
``adapters.config``/``adapters.logging``, the in-memory ones in
``adapters.memory``.

``Config`` and ``MenuConfig`` are only needed for annotations and stay
behind ``TYPE_CHECKING``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.player import Player

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.sections import MenuConfig


class GetConfig(Protocol):
    """Return the merged configuration, optionally for a named profile.

    Raises ``ValueError`` for a profile name that is not allowed.
    """

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Write ``config`` (or one section of it) to stdout.

    Raises ``ValueError`` when ``section`` is not present.
    """

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class LoadMenuConfigFromDict(Protocol):
    """Validate the ``[menu]`` section; raises ``ConfigurationError`` when malformed."""

    def __call__(self, config_dict: Mapping[str, Any]) -> MenuConfig: ...


class LoadPlayerRecordFromDict(Protocol):
    """Pick the player record out of the configuration.

    Raises ``ConfigurationError`` when ``[player]`` is not a table.
    """

    def __call__(self, config_dict: Mapping[str, Any]) -> Player | Mapping[str, object]: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadMenuConfigFromDict",
    "LoadPlayerRecordFromDict",
]
