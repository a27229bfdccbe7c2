"""Language, profile display and reset commands."""

import click

from ..models.user_profile import Language
from .generate import generate
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    load_service,
    require_profile,
)


@click.command()
@click.argument("lang", type=click.Choice([lang.value for lang in Language]), required=False)
@click.pass_context
@async_command
async def language(ctx: click.Context, lang: str | None):
    """Show or set the display language (es/en).

    New plans are generated in this language.
    """
    ensure_initialized(ctx)
    service = await load_service()

    if lang is None:
        click.echo(service.state.language.value)
        return

    await service.set_language(lang)
    echo_success(f"Language set to {lang}")


@click.group()
def profile():
    """Show or edit your profile."""
    pass


@profile.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the saved profile and its derived metrics."""
    ensure_initialized(ctx)
    service = await load_service()
    require_profile(ctx, service)

    t = service.t
    cards = service.summary_cards()
    click.echo(service.state.profile.get_summary())
    click.echo(f"{t['card_bmi']}: {cards.bmi} ({cards.bmi_category})")
    click.echo(f"{t['card_cv_risk']}: {t['risk_' + cards.cv_risk]}")


@profile.command("edit")
@click.pass_context
def edit(ctx: click.Context):
    """Edit the profile interactively and regenerate the plan."""
    ctx.invoke(generate, edit=True)


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
@async_command
async def reset(ctx: click.Context, yes: bool):
    """Delete your profile, progress history and plan."""
    ensure_initialized(ctx)
    service = await load_service()
    t = service.t

    if not yes and not click.confirm(t["reset_confirm"]):
        echo_info("Nothing deleted.")
        return

    await service.reset()
    echo_success(t["reset_done"])
