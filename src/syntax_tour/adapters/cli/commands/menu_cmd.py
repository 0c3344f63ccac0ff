"""``syntax-tour menu``: print the line for one meal."""

from __future__ import annotations

import logging

import rich_click as click

from syntax_tour.adapters.logging import job_scope
from syntax_tour.domain.enums import MealKind
from syntax_tour.domain.menu import describe_meal

from ..context import RunContext
from ..errors import exits_on_config_error
from ..params import CLICK_CONTEXT_SETTINGS, MEAL_CHOICE

logger = logging.getLogger(__name__)


@click.command("menu", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--meal", type=MEAL_CHOICE, default=MealKind.DINNER.value, show_default=True, help="Meal to describe")
@click.option("--food", default=None, help="What is for dinner; replaces [menu] dinner_food")
@click.pass_context
@exits_on_config_error("menu")
def cli_menu(ctx: click.Context, meal: str, food: str | None) -> None:
    """Print what is on the menu, dinner unless --meal says otherwise.

    [menu] is read even when --food replaces its value, so a broken
    section is reported either way.
    """
    run = RunContext.of(ctx)
    kind = MealKind(meal.lower())
    with job_scope("cli-menu", command="menu", meal=kind.value):
        configured = run.menu()
        dinner_food = configured.dinner_food if food is None else food
        logger.info("Describing meal", extra={"food": dinner_food})
        click.echo(describe_meal(kind, dinner_food))


__all__ = ["cli_menu"]
