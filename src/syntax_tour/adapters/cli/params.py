"""Option types and checks shared by the root group and its commands."""

from __future__ import annotations

from typing import Any, Final

import rich_click as click

from syntax_tour.adapters.config.loader import validate_profile
from syntax_tour.domain.enums import MealKind, OutputFormat

CLICK_CONTEXT_SETTINGS: Final[dict[str, Any]] = {"help_option_names": ["--help", "-h"], "max_content_width": 100}

MEAL_CHOICE: Final = click.Choice([kind.value for kind in MealKind], case_sensitive=False)
FORMAT_CHOICE: Final = click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False)


def checked_profile(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """``--profile`` callback: refuse names that are unsafe as a directory name.

    A refused name is a usage error (exit 2) raised before any configuration
    file is looked up.
    """
    if value is None:
        return None
    try:
        validate_profile(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc
    return value


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "FORMAT_CHOICE",
    "MEAL_CHOICE",
    "checked_profile",
]
