"""``--set SECTION.KEY[.SUBKEY...]=VALUE`` overrides.

Values are read as JSON when they parse (``42``, ``true``,
``{"city": "Akron"}``) and kept as text otherwise, so
``--set menu.dinner_food=tofu steak`` needs no quoting.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue

    @property
    def dotted(self) -> str:
        """``section.key.subkey`` as typed on the command line."""
        return ".".join((self.section, *self.key_path))


def _malformed(raw: str, problem: str) -> ValueError:
    return ValueError(f"--set {raw!r} {problem}")


def parse_override(raw: str) -> ConfigOverride:
    """Split one ``--set`` argument at its first ``=`` and its dots.

    Raises:
        ValueError: When ``=`` is missing, there is no ``SECTION.KEY``
            before it, or a name between dots is empty.

    Examples:
        >>> parse_override("menu.dinner_food=tofu steak")
        ConfigOverride(section='menu', key_path=('dinner_food',), value='tofu steak')
        >>> parse_override("player.address.city=Akron").dotted
        'player.address.city'
    """
    dotted, equals, text = raw.partition("=")
    if not equals:
        raise _malformed(raw, "must contain '='")
    section, *keys = dotted.split(".")
    if not keys:
        raise _malformed(raw, "needs SECTION.KEY before '='")
    if not section:
        raise _malformed(raw, "has an empty section name")
    if "" in keys:
        raise _malformed(raw, "has an empty key between dots")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(text))


def coerce_value(text: str) -> OverrideValue:
    """Return ``text`` decoded as JSON, or unchanged when it is not JSON.

    Examples:
        >>> coerce_value("42"), coerce_value("true"), coerce_value("null")
        (42, True, None)
        >>> coerce_value("chicken salad")
        'chicken salad'
    """
    if not text:
        return text
    try:
        return orjson.loads(text)
    except ValueError:
        return text


def _as_patch(overrides: Iterable[ConfigOverride]) -> dict[str, dict[str, object]]:
    """Fold overrides into nested tables, later entries winning.

    Raises:
        TypeError: When an entry needs a table where an earlier entry put a value.
    """
    patch: dict[str, dict[str, object]] = {}
    for override in overrides:
        table = patch.setdefault(override.section, {})
        *parents, leaf = override.key_path
        for depth, key in enumerate(parents, start=1):
            child = table.setdefault(key, {})
            if not isinstance(child, dict):
                clash = ".".join((override.section, *override.key_path[:depth]))
                raise TypeError(f"--set {override.dotted} conflicts with the value given for {clash}")
            table = cast("dict[str, object]", child)
        table[leaf] = override.value
    return patch


def apply_overrides(config: Config, raw_overrides: Sequence[str]) -> Config:
    """Return ``config`` with every ``--set`` entry deep-merged in.

    Untouched keys keep their values; with no entries ``config`` itself is
    returned.

    Raises:
        ValueError: For a malformed entry.
        TypeError: For entries that contradict each other.

    Examples:
        >>> base = Config({"player": {"club": "LA Lakers", "address": {"city": "Los Angeles"}}}, {})
        >>> merged = apply_overrides(base, ("player.address.city=Akron",))
        >>> merged.get("player.address.city"), merged.get("player.club")
        ('Akron', 'LA Lakers')
    """
    if not raw_overrides:
        return config
    return config.with_overrides(_as_patch(parse_override(raw) for raw in raw_overrides))


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
