"""``syntax-tour`` command line: the root group, its commands and the process entry."""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_menu, cli_player
from .context import RunContext, TracebackState
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "ExitCode",
    "RunContext",
    "TracebackState",
    "cli",
    "cli_config",
    "cli_info",
    "cli_menu",
    "cli_player",
    "main",
]
