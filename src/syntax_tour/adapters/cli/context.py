"""State the root group hands to every subcommand, and the traceback flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from syntax_tour.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from collections.abc import Mapping

    from syntax_tour.adapters.config.sections import MenuConfig
    from syntax_tour.composition import AppServices
    from syntax_tour.domain.player import Player


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools.config`` flags that ``--traceback`` drives.

    Example:
        >>> saved = TracebackState.current()
        >>> TracebackState.requested(True).install()
        >>> TracebackState.current()
        TracebackState(enabled=True, force_color=True)
        >>> saved.install()
    """

    enabled: bool
    force_color: bool

    @classmethod
    def current(cls) -> TracebackState:
        settings = lib_cli_exit_tools.config
        return cls(bool(settings.traceback), bool(settings.traceback_force_color))

    @classmethod
    def requested(cls, enabled: bool) -> TracebackState:
        """Full tracebacks are printed in color, summaries without."""
        return cls(enabled, enabled)

    def install(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


@dataclass(frozen=True, slots=True)
class RunContext:
    """What one ``syntax-tour`` run resolved before its subcommand started.

    Attributes:
        services: Ports wired by the composition root.
        config: Configuration with the ``--set`` entries merged in.
        profile: The root ``--profile``, if one was given.
        set_overrides: The raw ``--set`` entries, reapplied when a command
            reads another profile.
    """

    services: AppServices
    config: Config
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def attach(self, ctx: click.Context) -> None:
        """Make this the ``obj`` every subcommand context inherits."""
        ctx.obj = self

    @classmethod
    def of(cls, ctx: click.Context) -> RunContext:
        """Return the context attached by the root group.

        Raises:
            RuntimeError: When a command is invoked without the root group.
        """
        found = ctx.find_object(cls)
        if found is None:
            raise RuntimeError(f"{ctx.info_name!r} must run below the syntax-tour group")
        return found

    def menu(self) -> MenuConfig:
        return self.services.load_menu_config(self.config.as_dict())

    def player_record(self) -> Player | Mapping[str, object]:
        return self.services.load_player_record(self.config.as_dict())

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Configuration and profile name for a command-level ``--profile``.

        ``None`` keeps this run's configuration. A name reads that profile
        afresh and merges the same ``--set`` entries into it.
        """
        if profile is None:
            return self.config, self.profile
        return apply_overrides(self.services.get_config(profile=profile), self.set_overrides), profile


__all__ = [
    "RunContext",
    "TracebackState",
]
