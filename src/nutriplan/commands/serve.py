"""Web server command."""

import click

from ..config import get_settings
from .base import echo_warning, ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the web interface.

    The four tabs (plan, evolution, profile, science) are served on the given
    host and port. All state lives in the local database, so the CLI and the
    web UI can be used side by side.

    Examples:

        # Start on default port (8000)
        nutriplan serve

        # Development mode with auto-reload
        nutriplan serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    settings = get_settings()
    if not settings.has_api_key:
        echo_warning("GEMINI_API_KEY is not set. Plans and meal alternatives cannot be generated.")

    click.echo(click.style("Starting nutriplan web server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Model:   {settings.model}")
    click.echo("Press Ctrl+C to stop the server.")

    if reload:
        uvicorn.run("nutriplan.web:create_app", host=host, port=port, reload=True, factory=True)
    else:
        uvicorn.run(create_app(settings=settings), host=host, port=port)
