"""Subcommands of the ``syntax-tour`` group."""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .menu_cmd import cli_menu
from .player_cmd import cli_player

__all__ = [
    "cli_config",
    "cli_info",
    "cli_menu",
    "cli_player",
]
