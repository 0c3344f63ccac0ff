"""``syntax-tour player``: pull name, club and city out of the player record."""

from __future__ import annotations

import logging

import rich_click as click

from syntax_tour.adapters.logging import job_scope
from syntax_tour.domain.player import describe_club, describe_residence, extract_player_fields

from ..context import RunContext
from ..errors import exits_on_config_error
from ..params import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("player", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--club/--no-club", "show_club", default=False, help="Also print which club the player plays for")
@click.pass_context
@exits_on_config_error("player")
def cli_player(ctx: click.Context, show_club: bool) -> None:
    """Print where the [player] lives, Lebron James when the section is absent.

    A field missing from the section is an error, never a blank.
    """
    run = RunContext.of(ctx)
    with job_scope("cli-player", command="player"):
        fields = extract_player_fields(run.player_record())
        logger.info("Extracted player fields", extra={"user_name": fields.user_name})
        if show_club:
            click.echo(describe_club(fields))
        click.echo(describe_residence(fields))


__all__ = ["cli_player"]
