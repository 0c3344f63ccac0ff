"""The ``syntax-tour`` group: global options, configuration and logging start-up.

Click's ``obj`` arrives as a services factory from the composition root.
The group calls it once, reads configuration for ``--profile``, merges the
``--set`` entries, starts logging and replaces ``obj`` with a
:class:`~.context.RunContext` for the subcommand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from syntax_tour import __init__conf__
from syntax_tour.adapters.config.overrides import apply_overrides

from .commands import cli_config, cli_info, cli_menu, cli_player
from .context import RunContext, TracebackState
from .params import CLICK_CONTEXT_SETTINGS, checked_profile

if TYPE_CHECKING:
    from syntax_tour.composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError(f"syntax-tour needs a services factory as Click obj, got {factory!r}")
    return factory()


def _merged(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Merge ``--set`` entries; a malformed or contradictory one is a usage error."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="--set") from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option("--traceback/--no-traceback", default=False, help="On a crash print the full traceback, not a summary")
@click.option(
    "--profile",
    default=None,
    callback=checked_profile,
    help="Also read configuration from profile/<NAME>/ directories (e.g. 'weekend')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeatable",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and logging, or print help when no command is given."""
    TracebackState.requested(traceback).install()
    services = _services_from(ctx)
    config = _merged(services.get_config(profile=profile), set_overrides)
    services.init_logging(config)
    RunContext(services, config, profile, set_overrides).attach(ctx)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_menu, cli_player, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
