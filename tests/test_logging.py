"""lib_log_rich settings and the per-command log scope."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pytest
from lib_layered_config import Config

from syntax_tour.adapters.logging import setup
from syntax_tour.adapters.logging.setup import LogSettings, job_scope


@pytest.mark.os_agnostic
def test_unknown_keys_are_forwarded_as_runtime_options() -> None:
    settings = LogSettings.from_config(
        Config({"lib_log_rich": {"service": "menu-board", "environment": "dev", "console_level": "info"}}, {})
    )

    assert (settings.service, settings.environment) == ("menu-board", "dev")
    assert settings.model_extra == {"console_level": "info"}


@pytest.mark.os_agnostic
def test_missing_table_names_the_service_after_the_package() -> None:
    settings = LogSettings.from_config(Config({"menu": {"dinner_food": "soup"}}, {}))

    assert settings.service == "syntax_tour"
    assert settings.environment == "prod"


@pytest.mark.os_agnostic
class TestJobScope:
    """Binding only happens once lib_log_rich runs."""

    def test_stopped_runtime_runs_the_block_without_binding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        bound: list[dict[str, object]] = []
        monkeypatch.setattr(setup.lib_log_rich.runtime, "is_initialised", lambda: False)
        monkeypatch.setattr(setup.lib_log_rich.runtime, "bind", lambda **fields: bound.append(fields))
        ran = False

        with job_scope("cli-menu", meal="dinner"):
            ran = True

        assert ran
        assert bound == []

    def test_running_runtime_binds_job_and_extra(self, monkeypatch: pytest.MonkeyPatch) -> None:
        bound: list[dict[str, object]] = []

        @contextmanager
        def _bind(**fields: object) -> Iterator[None]:
            bound.append(fields)
            yield

        monkeypatch.setattr(setup.lib_log_rich.runtime, "is_initialised", lambda: True)
        monkeypatch.setattr(setup.lib_log_rich.runtime, "bind", _bind)

        with job_scope("cli-player", command="player"):
            pass

        assert bound == [{"job_id": "cli-player", "extra": {"command": "player"}}]
