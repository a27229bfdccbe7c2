"""Scientific references command."""

import click

from ..data.medical_data import GENETIC_MARKERS, get_medications_impact, get_references
from ..i18n import get_translation
from .base import async_command, load_service


@click.command()
@click.option("--lang", type=click.Choice(["es", "en"]), help="Override display language")
@async_command
async def refs(lang: str | None):
    """Show the scientific references behind the plans."""
    if lang is None:
        service = await load_service()
        lang = service.state.language.value

    t = get_translation(lang)
    references = get_references(lang)

    click.echo()
    click.echo(click.style(t["refs_title"], bold=True))
    click.echo("=" * 50)

    for title, key in (
        (t["refs_methodology"], "diets"),
        (t["refs_tables"], "nutritional_tables"),
        (t["refs_cv_risk"], "cv_risk"),
    ):
        click.echo()
        click.echo(click.style(title, fg="green", bold=True))
        click.echo(references[key])

    click.echo()
    click.echo(click.style(t["refs_meds"], fg="red", bold=True))
    click.echo(references["medications"])
    for item in get_medications_impact(lang):
        click.echo(f"  - {item}")

    click.echo()
    click.echo(click.style(t["refs_genetics"], fg="green", bold=True))
    for marker in GENETIC_MARKERS:
        click.echo(f"  - {marker.label}: {marker.describe(lang)}")
