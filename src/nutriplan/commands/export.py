"""Export progress history commands."""

from pathlib import Path

import click

from ..generators.history_report import (
    CSV_FILENAME,
    HistoryReportGenerator,
    ReportConfig,
    pdf_filename,
)
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    load_service,
    require_profile,
)


@click.command()
@click.argument("format", type=click.Choice(["pdf", "csv", "email"]))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to this file instead of the default name",
)
@click.option(
    "--open",
    "open_mail",
    is_flag=True,
    help="Open the e-mail draft in the default mail client",
)
@click.pass_context
@async_command
async def export(ctx, format: str, output: Path | None, open_mail: bool):
    """Export your progress history.

    Examples:
        # PDF report in the current directory
        nutriplan export pdf

        # Spreadsheet-friendly CSV
        nutriplan export csv -o history.csv

        # Print (or open) a prefilled e-mail with your latest entry
        nutriplan export email --open
    """
    ensure_initialized(ctx)
    service = await load_service()
    require_profile(ctx, service)

    history = service.state.history
    generator = HistoryReportGenerator(ReportConfig(language=service.state.language.value))

    if format == "email":
        url = generator.to_mailto(history)
        if url is None:
            echo_error(service.t["tracking_empty"])
            ctx.exit(1)
        if open_mail:
            click.launch(url)
            echo_success("Opened e-mail draft")
        else:
            click.echo(url)
        return

    if format == "pdf":
        path = output or Path(pdf_filename())
        path.write_bytes(generator.to_pdf(history))
    else:
        path = output or Path(CSV_FILENAME)
        path.write_text(generator.to_csv(history) + "\n", encoding="utf-8")

    echo_success(f"Exported {len(history)} entries to {path}")
    if not history:
        echo_info("The history is empty; only the header was written.")
