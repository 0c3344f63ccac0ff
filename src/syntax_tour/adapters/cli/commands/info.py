"""``syntax-tour info``: show what is installed."""

from __future__ import annotations

import logging

import rich_click as click

from syntax_tour import __init__conf__
from syntax_tour.adapters.logging import job_scope

from ..params import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version and homepage of this installation."""
    with job_scope("cli-info", command="info"):
        logger.info("Showing package metadata")
        __init__conf__.print_info()


__all__ = ["cli_info"]
