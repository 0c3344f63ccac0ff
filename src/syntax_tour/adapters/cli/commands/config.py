"""``syntax-tour config``: show the merged configuration."""

from __future__ import annotations

import logging

import rich_click as click

from syntax_tour.adapters.logging import job_scope
from syntax_tour.domain.enums import OutputFormat

from ..context import RunContext
from ..exit_codes import ExitCode
from ..params import CLICK_CONTEXT_SETTINGS, FORMAT_CHOICE, checked_profile

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=FORMAT_CHOICE,
    default=OutputFormat.HUMAN.value,
    help="human: annotated TOML-like listing; json: one JSON document",
)
@click.option("--section", default=None, help="Only this top-level table, e.g. menu")
@click.option(
    "--profile",
    default=None,
    callback=checked_profile,
    help="Show this profile instead of the one given to syntax-tour",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show configuration after defaults, files, .env, environment and --set are merged.

    An unknown --section exits with code 22.
    """
    run = RunContext.of(ctx)
    config, shown_profile = run.config_for(profile)
    fmt = OutputFormat(output_format.lower())
    with job_scope("cli-config", command="config", format=fmt.value, profile=shown_profile):
        logger.info("Showing configuration", extra={"section": section})
        try:
            run.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.UNKNOWN_SECTION) from exc


__all__ = ["cli_config"]
