"""Configuration held in a dict instead of discovered on disk.

``InMemoryConfig`` answers ``get_config`` from fixed data and remembers which
profiles were asked for. ``display_config_in_memory`` prints that data with
orjson rather than lib_layered_config's Rich renderer, so output stays plain
text in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import click
import orjson
from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.loader import validate_profile


class InMemoryConfig:
    """Callable ``GetConfig`` serving the same data for every profile.

    Profile names are validated like the real loader does, so a bad
    ``--profile`` fails the same way with either wiring.

    Example:
        >>> source = InMemoryConfig({"menu": {"dinner_food": "soup"}})
        >>> source(profile="weekend").get("menu.dinner_food")
        'soup'
        >>> source.requested_profiles
        ['weekend']
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self.requested_profiles: list[str | None] = []

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        if profile is not None:
            validate_profile(profile)
        self.requested_profiles.append(profile)
        return Config(self._data, {})


def _selected(config: Config, section: str | None) -> dict[str, Any]:
    data = config.as_dict()
    if section is None:
        return data
    if section not in data:
        raise ValueError(f"Section {section!r} not found in configuration")
    return {section: data[section]}


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` as sorted JSON, or as ``[section]`` blocks of ``key = value`` lines."""
    data = _selected(config, section)
    if output_format is OutputFormat.JSON:
        click.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS).decode())
        return
    for name, body in data.items():
        click.echo(f"[{name}]")
        pairs = body.items() if isinstance(body, Mapping) else [("value", body)]
        for key, value in pairs:
            click.echo(f"{key} = {orjson.dumps(value).decode()}")


__all__ = [
    "InMemoryConfig",
    "display_config_in_memory",
]
