"""Plan viewing and meal swap commands."""

import click
import questionary

from ..exceptions import StaleSwapError
from ..models.diet import DailyDiet, Meal, MealSlot
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    load_service,
    require_plan,
)


@click.group()
def plan():
    """View the current weekly plan and swap meals."""
    pass


@plan.command("show")
@click.option("--day", "-d", type=click.IntRange(1, 7), help="Show one day in detail (1-7)")
@click.option("--recipes", "-r", is_flag=True, help="Include cooking instructions")
@click.pass_context
@async_command
async def show(ctx: click.Context, day: int | None, recipes: bool):
    """Show the weekly overview or a single day."""
    ensure_initialized(ctx)
    service = await load_service()
    diet = require_plan(ctx, service)

    if day is None:
        click.echo(diet.get_summary())
        return

    t = service.t
    _print_day(diet.get_day(day - 1), t, recipes)


@plan.command("day")
@click.argument("number", type=click.IntRange(1, 7))
@click.option("--recipes", "-r", is_flag=True, help="Include cooking instructions")
@click.pass_context
def day(ctx: click.Context, number: int, recipes: bool):
    """Show day NUMBER (1-7) in detail."""
    ctx.invoke(show, day=number, recipes=recipes)


@plan.command("advice")
@click.pass_context
@async_command
async def advice(ctx: click.Context):
    """Show recommendations, exercise, NEAT and supplement advice."""
    ensure_initialized(ctx)
    service = await load_service()
    diet = require_plan(ctx, service)

    t = service.t
    for title, text in (
        (t["diet_recommendations"], diet.recommendations),
        (t["diet_exercise_plan"], diet.exercise_plan),
        (t["diet_basal"], diet.basal_recommendations),
        (t["diet_supplements"], diet.supplement_advise),
    ):
        click.echo(click.style(title, bold=True))
        click.echo(text)
        click.echo()


@plan.command("swap")
@click.argument("day", type=click.IntRange(1, 7))
@click.argument("slot", type=click.Choice([s.value for s in MealSlot]))
@click.pass_context
@async_command
async def swap(ctx: click.Context, day: int, slot: str):
    """Replace a meal with an AI-suggested alternative.

    DAY is 1-7 and SLOT one of breakfast, lunch, snack, dinner. The day's
    total calories are recomputed from the four meals.
    """
    ensure_initialized(ctx)
    service = await load_service()
    diet = require_plan(ctx, service)

    current = diet.get_day(day - 1).get_meal(MealSlot(slot))
    echo_info(f"Looking for alternatives to: {current.name} ({current.calories:g} kcal)")

    token, alternatives = await service.request_alternatives(day - 1, slot)
    if not alternatives:
        echo_error(service.t["no_alternatives"])
        ctx.exit(1)

    choice = await questionary.select(
        "Choose a replacement:",
        choices=[
            questionary.Choice(_meal_line(meal), meal) for meal in alternatives
        ] + [questionary.Choice("Keep current meal", "keep")],
    ).ask_async()

    if not isinstance(choice, Meal):
        echo_info("No changes made.")
        return

    try:
        diet = await service.swap_meal(day - 1, slot, choice, token=token)
    except StaleSwapError as e:
        echo_error(str(e))
        ctx.exit(1)

    updated = diet.get_day(day - 1)
    echo_success(f"Swapped {slot}: {choice.name}")
    echo_info(f"{updated.day} total: {updated.total_calories:g} kcal")


def _meal_line(meal: Meal) -> str:
    return (
        f"{meal.name} - {meal.calories:g} kcal "
        f"(P {meal.protein:g}g / C {meal.carbs:g}g / F {meal.fats:g}g)"
    )


def _print_day(day: DailyDiet, t: dict[str, str], recipes: bool) -> None:
    click.echo(click.style(day.day, bold=True))
    click.echo("=" * 50)
    for slot in MealSlot:
        meal = day.get_meal(slot)
        click.echo()
        click.echo(click.style(f"{t['meal_' + slot.value]}: {meal.name}", bold=True))
        click.echo(f"  {meal.description}")
        click.echo(f"  {_meal_line(meal)}")
        click.echo(f"  {meal.prep_time} | {meal.difficulty}")
        if recipes:
            click.echo()
            for line in meal.instructions.splitlines():
                click.echo(f"    {line}")

    click.echo()
    macros = day.macro_totals()
    click.echo(
        f"{t['diet_total']}: {day.total_calories:g} kcal "
        f"(P {macros['protein']:g}g / C {macros['carbs']:g}g / F {macros['fats']:g}g)"
    )
    if day.exercise_note:
        click.echo(f"{t['diet_exercise_note']}: {day.exercise_note}")
