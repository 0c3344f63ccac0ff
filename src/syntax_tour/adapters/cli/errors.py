"""How ``menu`` and ``player`` fail on configuration they cannot use.

Both read a record out of configuration. When that record is malformed or
incomplete the failure is logged, written to stderr as ``Error: ...`` and the
run ends with :attr:`ExitCode.CONFIG_ERROR`. Domain record errors do not know
which section the record came from, so their message gets a ``[section]``
prefix.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import NoReturn, ParamSpec, TypeVar

import rich_click as click

from syntax_tour.domain.errors import ConfigurationError, MissingFieldError, RecordShapeError

from .exit_codes import ExitCode

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def _give_up(section: str, message: str, cause: Exception) -> NoReturn:
    logger.error("Configuration rejected", extra={"section": section, "error": message})
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(ExitCode.CONFIG_ERROR) from cause


def exits_on_config_error(section: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorate a command so configuration failures exit with code 78.

    Place it below ``@click.pass_context`` so it wraps the command body only.

    Example:
        >>> @exits_on_config_error("player")
        ... def show() -> None:
        ...     raise MissingFieldError("address.city")
        >>> show()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        SystemExit: 78
    """

    def decorate(command: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(command)
        def run(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return command(*args, **kwargs)
            except ConfigurationError as exc:
                _give_up(section, str(exc), exc)
            except (MissingFieldError, RecordShapeError) as exc:
                _give_up(section, f"[{section}] {exc}", exc)

        return run

    return decorate


__all__ = ["exits_on_config_error"]
