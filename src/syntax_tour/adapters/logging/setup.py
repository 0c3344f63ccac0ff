"""lib_log_rich for syntax-tour: start-up from configuration, per-command context.

The ``[lib_log_rich]`` table is read through :class:`LogSettings`; keys the
model does not name are ``RuntimeConfig`` options and are forwarded as they
are. Commands wrap their work in :func:`job_scope` so every record they log
carries the command name.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from syntax_tour import __init__conf__


class LogSettings(BaseModel):
    """The ``[lib_log_rich]`` configuration table.

    Example:
        >>> settings = LogSettings.model_validate({"environment": "dev", "console_level": "info"})
        >>> settings.service, settings.environment, settings.model_extra
        ('syntax_tour', 'dev', {'console_level': 'info'})
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"

    @classmethod
    def from_config(cls, config: Config) -> LogSettings:
        return cls.model_validate(config.get("lib_log_rich", default=None) or {})

    def runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        options: dict[str, Any] = self.model_extra or {}
        return lib_log_rich.runtime.RuntimeConfig(service=self.service, environment=self.environment, **options)


def init_logging(config: Config) -> None:
    """Start lib_log_rich from ``config`` unless it is already running.

    ``LOG_*`` variables from a ``.env`` file are honoured, and stdlib
    ``logging`` is bridged so the commands' ``logging.getLogger`` loggers
    reach lib_log_rich.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(LogSettings.from_config(config).runtime_config())
    lib_log_rich.runtime.attach_std_logging()


@contextmanager
def job_scope(job_id: str, **extra: object) -> Iterator[None]:
    """Bind ``job_id`` and ``extra`` to the records logged inside the block.

    Without a running lib_log_rich, as with ``build_testing`` wiring, the
    block simply runs.

    Example:
        >>> with job_scope("cli-menu", meal="dinner"):
        ...     print("logged with context when lib_log_rich runs")
        logged with context when lib_log_rich runs
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=job_id, extra=extra):
        yield


__all__ = [
    "LogSettings",
    "init_logging",
    "job_scope",
]
