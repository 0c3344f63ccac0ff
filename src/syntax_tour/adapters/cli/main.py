"""Process entry for ``syntax-tour`` and ``python -m syntax_tour``.

Click runs with ``standalone_mode=False`` so every way a run can end comes
back here as a value or an exception. Usage errors print Click's message,
``SystemExit`` from a command keeps its code, and anything else is a crash
reported by lib_cli_exit_tools: a short summary, or the full traceback under
``--traceback``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from syntax_tour import __init__conf__

from .context import TracebackState
from .exit_codes import ExitCode
from .root import cli

if TYPE_CHECKING:
    from syntax_tour.composition import AppServices

SUMMARY_CHARS: Final[int] = 500
VERBOSE_CHARS: Final[int] = 10_000


def _report_crash(exc: BaseException) -> int:
    """Print the exception being handled and return its exit code."""
    verbose = TracebackState.current().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=VERBOSE_CHARS if verbose else SUMMARY_CHARS,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        return _report_crash(exc)
    # --help and --version come back as their exit code, commands as None
    return outcome if isinstance(outcome, int) else int(ExitCode.SUCCESS)


@contextmanager
def _traceback_flags_restored(restore: bool) -> Iterator[None]:
    saved = TracebackState.current()
    try:
        yield
    finally:
        if restore:
            saved.install()


def _stop_logging() -> None:
    """Flush and stop lib_log_rich; only the main thread owns the runtime."""
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``syntax-tour`` and return the exit code instead of exiting.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the ``lib_cli_exit_tools`` traceback flags
            back as they were once the run ends.
        services_factory: Wiring from :mod:`syntax_tour.composition`,
            ``build_production`` for real runs and ``build_testing`` in tests.

    Raises:
        ValueError: When ``services_factory`` is missing.

    Example:
        >>> from syntax_tour.composition import build_testing
        >>> main(["menu", "--meal", "lunch"], services_factory=build_testing)
        I'm going to eat pizza for lunch
        0
    """
    if services_factory is None:
        raise ValueError("main() needs services_factory, e.g. syntax_tour.composition.build_production")
    with _traceback_flags_restored(restore_traceback):
        try:
            return _invoke(argv, services_factory)
        finally:
            _stop_logging()


__all__ = ["main"]
