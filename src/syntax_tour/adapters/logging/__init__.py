"""Logging adapter: lib_log_rich start-up and per-command log context."""

from __future__ import annotations

from .setup import LogSettings, init_logging, job_scope

__all__ = [
    "LogSettings",
    "init_logging",
    "job_scope",
]
