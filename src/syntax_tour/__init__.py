"""Public package surface exposing the demonstrations, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: menu and player demonstrations
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.menu import (
    breakfast_menu,
    describe_meal,
    dinner_menu,
    lunch_menu,
)
from .domain.player import (
    DEFAULT_PLAYER,
    describe_residence,
    extract_player_fields,
)

__all__ = [
    "DEFAULT_PLAYER",
    "breakfast_menu",
    "describe_meal",
    "describe_residence",
    "dinner_menu",
    "extract_player_fields",
    "get_config",
    "lunch_menu",
    "print_info",
]
