"""Configuration adapter - loading, display, overrides, and typed sections.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.sections` - ``[menu]`` and ``[player]`` section access
"""

from __future__ import annotations

from .display import display_config
from .loader import clear_config_cache, get_config, get_default_config_path
from .overrides import apply_overrides
from .sections import MenuConfig, load_menu_config_from_dict, load_player_record_from_dict

__all__ = [
    "MenuConfig",
    "apply_overrides",
    "clear_config_cache",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_menu_config_from_dict",
    "load_player_record_from_dict",
]
