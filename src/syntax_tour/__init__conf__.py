"""Static package metadata surfaced to CLI commands and documentation.

Values here mirror ``pyproject.toml`` and are kept as plain constants so the
CLI can report them without importing ``importlib.metadata`` at startup.

Contents:
    * Project identifiers (``name``, ``title``, ``version``, ``shell_command``)
    * ``LAYEREDCONF_*`` identifiers that select configuration directories
    * :func:`print_info` - render the metadata block for ``syntax-tour info``
"""

from __future__ import annotations

name = "syntax_tour"
title = "Small demonstrations of functions, templates and nested field extraction"
version = "1.0.0"
homepage = "https://github.com/syntax-tour/syntax-tour"
author = "syntax-tour contributors"
author_email = "maintainers@syntax-tour.dev"
shell_command = "syntax-tour"

#: Vendor, application and slug used by lib_layered_config for path discovery.
LAYEREDCONF_VENDOR: str = "syntax-tour"
LAYEREDCONF_APP: str = "Syntax Tour"
LAYEREDCONF_SLUG: str = "syntax-tour"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for syntax_tour:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
