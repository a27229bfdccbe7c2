"""Generate plan command."""

from dataclasses import replace

import click

from ..clients.manual import ManualInputClient
from ..exceptions import ConfigurationError, GenerationError, ProfileValidationError
from ..models.user_profile import DietType, UserProfile
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    load_service,
)


@click.command()
@click.option("--edit", "-e", is_flag=True, help="Review the profile interactively first")
@click.option("--age", type=int, help="Override age (12-100)")
@click.option("--weight", type=float, help="Override weight in kg (35-250)")
@click.option("--height", type=float, help="Override height in cm (100-230)")
@click.option("--waist", type=float, help="Override waist in cm (40-180)")
@click.option(
    "--diet",
    type=click.Choice([d.value for d in DietType]),
    help="Override diet style",
)
@click.pass_context
@async_command
async def generate(
    ctx,
    edit: bool,
    age: int | None,
    weight: float | None,
    height: float | None,
    waist: float | None,
    diet: str | None,
):
    """Generate a personalized weekly plan.

    Without a saved profile (or with --edit) an interactive questionnaire
    collects it first. The profile is validated before anything is sent.

    Examples:

        # First run: questionnaire, then plan
        nutriplan generate

        # Regenerate with an updated weight
        nutriplan generate --weight 72.5

        # Review every answer before regenerating
        nutriplan generate --edit
    """
    ensure_initialized(ctx)
    service = await load_service()

    profile = service.state.profile
    if profile is None or edit:
        client = ManualInputClient(language=service.state.language)
        try:
            profile = await client.collect_profile(initial=profile)
        except KeyboardInterrupt:
            echo_error("Questionnaire cancelled")
            ctx.exit(1)

    profile = _apply_overrides(profile, age=age, weight=weight, height=height, waist=waist, diet=diet)

    t = service.t
    echo_info(t["working"])
    echo_info(t["working_desc"])
    click.echo()

    try:
        diet_plan = await service.submit_profile(profile)
    except ProfileValidationError as e:
        echo_error(t["error_fix_form"])
        for field_name, code in sorted(e.errors.items()):
            message = t["error_required"] if code == "required" else t["error_invalid_range"]
            click.echo(f"  - {field_name}: {message}")
        ctx.exit(1)
    except (ConfigurationError, GenerationError):
        echo_error(service.state.error)
        ctx.exit(1)

    echo_success("Plan generated successfully!")
    click.echo()
    click.echo("=" * 60)
    click.echo(diet_plan.get_summary())
    click.echo("=" * 60)
    click.echo()
    click.echo("Next steps:")
    click.echo("  - View a day in detail: nutriplan plan show --day 1")
    click.echo("  - Swap a meal: nutriplan plan swap 1 lunch")
    click.echo("  - Read the advice: nutriplan plan advice")


def _apply_overrides(profile: UserProfile, **overrides) -> UserProfile:
    changes = {name: value for name, value in overrides.items() if value is not None}
    if "diet" in changes:
        changes["diet_type"] = DietType(changes.pop("diet"))
    return replace(profile, **changes) if changes else profile
