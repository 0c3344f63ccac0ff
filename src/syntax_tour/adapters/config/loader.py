"""Layered configuration for syntax-tour.

Sources, lowest precedence first: the ``defaultconfig.toml`` shipped in this
package, then app, host and user files, ``.env`` and environment variables,
all located by lib_layered_config from the identifiers in ``__init__conf__``.
A profile adds a ``profile/<name>/`` level to every file location.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from syntax_tour import __init__conf__

_DEFAULTS_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject names lib_layered_config cannot turn into a safe directory.

    Empty names, path separators, ``..``, leading ``-``/``_``, reserved
    Windows device names and names over ``max_length`` raise ``ValueError``.

    Example:
        >>> validate_profile("weekend")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Location of the bundled defaults.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULTS_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULTS_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read once per ``(profile, start_dir)``.

    Args:
        profile: Optional profile name, checked with :func:`validate_profile`
            before any file is looked up.
        start_dir: Directory where ``.env`` discovery starts; the current
            working directory when omitted.

    Example:
        >>> get_config().get("menu.dinner_food")
        'chicken salad'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget every cached read so the next :func:`get_config` goes to disk."""
    _read_layers.cache_clear()


__all__ = [
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
