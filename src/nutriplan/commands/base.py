"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..agents import DietPlanGenerator
from ..config import get_settings
from ..db import StateRepository, get_db_path
from ..models.diet import WeeklyDiet
from ..services.planner import PlannerService


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Exit unless ``nutriplan init`` has created the database."""
    if not get_db_path(get_settings().data_dir).exists():
        echo_error("Project not initialized. Run 'nutriplan init' first.")
        ctx.exit(1)


async def load_service() -> PlannerService:
    """Build a planner over the configured database and load its state."""
    settings = get_settings()
    service = PlannerService(
        repository=StateRepository(get_db_path(settings.data_dir)),
        generator=DietPlanGenerator(settings),
        default_language=settings.default_language,
    )
    await service.load()
    return service


def require_profile(ctx: click.Context, service: PlannerService) -> None:
    """Exit with a hint when no profile has been created yet."""
    if not service.state.has_profile:
        echo_error("No profile found. Run 'nutriplan generate' to create one.")
        ctx.exit(1)


def require_plan(ctx: click.Context, service: PlannerService) -> WeeklyDiet:
    """Return the current plan, or exit with a hint when there is none."""
    require_profile(ctx, service)
    if service.state.diet is None:
        echo_error("No plan generated yet. Run 'nutriplan generate'.")
        ctx.exit(1)
    return service.state.diet


def _echo_tagged(tag: str, color: str, message: str) -> None:
    click.echo(click.style(f"[{tag}] ", fg=color) + message)


def echo_success(message: str) -> None:
    """Print a success message."""
    _echo_tagged("OK", "green", message)


def echo_error(message: str) -> None:
    """Print an error message."""
    _echo_tagged("ERROR", "red", message)


def echo_info(message: str) -> None:
    """Print an info message."""
    _echo_tagged("INFO", "blue", message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    _echo_tagged("WARN", "yellow", message)


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def format_table(headers: list[str], rows: list[list], padding: int = 2) -> str:
    """Format rows as a plain-text table; numeric columns are right-aligned."""
    if not rows:
        return ""

    cells = [[str(cell) for cell in row] for row in rows]
    columns = list(zip(headers, *cells))
    widths = [max(len(value) for value in column) for column in columns]
    numeric = [all(_is_number(value) for value in column[1:]) for column in columns]
    gap = " " * padding

    def line(values: list[str]) -> str:
        return gap.join(
            value.rjust(width) if is_num else value.ljust(width)
            for value, width, is_num in zip(values, widths, numeric)
        ).rstrip()

    output = [line(list(headers)), gap.join("-" * w for w in widths)]
    output.extend(line(row) for row in cells)
    return "\n".join(output)
