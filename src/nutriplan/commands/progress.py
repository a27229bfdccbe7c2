"""Progress tracking commands."""

import click

from ..utils.calculators import (
    calculate_cv_risk_score,
    format_date,
    get_bmi_category,
)
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    load_service,
    require_profile,
)


@click.group()
def progress():
    """Log and review weight, waist and BMI over time."""
    pass


@progress.command("log")
@click.argument("weight", type=click.FloatRange(35, 250))
@click.argument("waist", type=click.FloatRange(40, 180))
@click.pass_context
@async_command
async def log(ctx: click.Context, weight: float, waist: float):
    """Record today's WEIGHT (kg) and WAIST (cm).

    Also updates the weight and waist stored in your profile.
    """
    ensure_initialized(ctx)
    service = await load_service()
    require_profile(ctx, service)

    entry = await service.log_progress(weight, waist)
    risk = calculate_cv_risk_score(waist, service.state.profile.height)

    echo_success(f"Logged {entry.weight} kg / {entry.waist} cm")
    click.echo(f"BMI: {entry.bmi} ({get_bmi_category(entry.bmi).value})")
    click.echo(f"CV risk: {service.t['risk_' + risk.value]}")


@progress.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the progress history and current metrics."""
    ensure_initialized(ctx)
    service = await load_service()
    require_profile(ctx, service)

    t = service.t
    lang = service.state.language.value
    cards = service.summary_cards()

    click.echo()
    click.echo(click.style(t["tracking_title"], bold=True))
    click.echo("=" * 50)
    click.echo(f"{t['card_bmi']}: {cards.bmi} ({cards.bmi_category})")
    click.echo(f"{t['card_weight']}: {cards.weight} kg")
    click.echo(f"{t['card_waist']}: {cards.waist} cm")
    click.echo(f"{t['card_cv_risk']}: {t['risk_' + cards.cv_risk]}")
    click.echo()

    history = service.state.history
    if not history:
        echo_info(t["tracking_empty"])
        return

    rows = [
        [format_date(e.date, lang), f"{e.weight}", f"{e.waist}", f"{e.bmi}"]
        for e in history
    ]
    click.echo(format_table(
        [t["col_date"], t["col_weight"], t["col_waist"], t["col_bmi"]],
        rows,
    ))

    if len(history) > 1:
        first, last = history[0], history[-1]
        click.echo()
        click.echo(
            f"Change: {last.weight - first.weight:+.1f} kg, "
            f"{last.waist - first.waist:+.1f} cm, BMI {last.bmi - first.bmi:+.1f}"
        )
