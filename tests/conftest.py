"""Fixtures shared by the syntax-tour test modules.

Command stories run on ``build_testing`` wiring: configuration is a dict,
``init_logging`` only records, nothing is read from disk.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any

import lib_cli_exit_tools
import pytest
import rtoml
from click.testing import CliRunner, Result
from dotenv import load_dotenv
from lib_layered_config import Config

from syntax_tour.adapters.cli import TracebackState, cli
from syntax_tour.adapters.config import loader
from syntax_tour.composition import build_testing

_PROJECT_ENV = Path(__file__).parent.parent / ".env"
if _PROJECT_ENV.exists():
    load_dotenv(_PROJECT_ENV)

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh runner; demonstration lines are on ``result.stdout``, log records on stderr."""
    return CliRunner(env={"COLUMNS": "200"})


@pytest.fixture(scope="session")
def shipped_defaults() -> dict[str, Any]:
    """The packaged ``defaultconfig.toml`` as plain data."""
    return rtoml.load(loader.get_default_config_path())


@pytest.fixture
def run_cli(cli_runner: CliRunner, shipped_defaults: dict[str, Any]) -> Callable[..., Result]:
    """Invoke ``syntax-tour`` with in-memory configuration.

    ``config`` becomes the entire configuration; without it the run sees the
    shipped defaults.

    Example:
        def test_lunch(run_cli: Callable[..., Result]) -> None:
            assert run_cli("menu", "--meal", "lunch").stdout == "I'm going to eat pizza for lunch\\n"
    """

    def _run(*args: str, config: Mapping[str, Any] | None = None) -> Result:
        services = build_testing(shipped_defaults if config is None else config)
        return cli_runner.invoke(cli, list(args), obj=lambda: services)

    return _run


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove terminal colour codes so Rich output can be matched as text."""
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with tracebacks off and put the process-wide flags back afterwards."""
    saved = TracebackState.current()
    lib_cli_exit_tools.reset_config()
    TracebackState.requested(False).install()
    try:
        yield
    finally:
        saved.install()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Make ``get_config`` read from disk for this test and forget it afterwards."""
    loader.clear_config_cache()
    yield
    loader.clear_config_cache()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a real ``Config`` from a dict, without any file lookup."""
    return lambda data: Config(data, {})
