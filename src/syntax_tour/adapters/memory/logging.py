"""Logging initializer that records its calls instead of starting lib_log_rich."""

from __future__ import annotations

from lib_layered_config import Config


class RecordingLogInit:
    """Callable ``InitLogging`` keeping every configuration it was handed.

    Example:
        >>> init = RecordingLogInit()
        >>> init(Config({"lib_log_rich": {"console_level": "debug"}}, {}))
        >>> init.configs[0].get("lib_log_rich.console_level")
        'debug'
    """

    def __init__(self) -> None:
        self.configs: list[Config] = []

    def __call__(self, config: Config) -> None:
        self.configs.append(config)


__all__ = ["RecordingLogInit"]
