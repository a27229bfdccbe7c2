"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, echo_warning


@click.command()
@async_command
async def init():
    """Initialize the nutriplan data directory and database.

    This creates the data directory and the SQLite file that stores your
    profile, progress history and current plan.
    """
    settings = get_settings()
    data_dir = settings.data_dir

    echo_info(f"Initializing nutriplan in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    if not settings.has_api_key:
        echo_warning("GEMINI_API_KEY is not set. Plan generation will fail until it is.")

    click.echo()
    click.echo("nutriplan is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your profile and your first plan:")
    click.echo("     nutriplan generate")
    click.echo()
    click.echo("  2. Log your progress:")
    click.echo("     nutriplan progress log 72.5 84")
    click.echo()
    click.echo("  3. Or use the web interface:")
    click.echo("     nutriplan serve")
