"""Quote and export commands for order configuration files."""

from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from booths.application.commands import SubmissionBlockedError
from booths.application.factory import get_factory
from booths.cli.commands.orders import open_order
from booths.infrastructure.exporters import ExportManager, ExporterRegistry
from booths.infrastructure.formatters import (
    PriceBreakdownFormatter,
    QuoteSummaryFormatter,
)


def quote_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON order configuration file"),
    ],
    breakdown: Annotated[
        bool,
        typer.Option("--breakdown", "-b", help="Show the pricing breakdown"),
    ] = False,
) -> None:
    """Show the order summary and estimated price for a configuration.

    The estimate is shown even when the configuration has validation
    errors; the errors are listed under the summary.

    Examples:
        booths quote lobby-booth.json
        booths quote lobby-booth.json --breakdown
    """
    order = open_order(config_file)
    factory = get_factory()
    quote = factory.create_quote_command().execute(order.template, order.config)

    typer.echo(QuoteSummaryFormatter(factory.catalog).format(quote))
    if breakdown:
        typer.echo()
        typer.echo(PriceBreakdownFormatter().format(quote))


def export_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON order configuration file"),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for the parameter file"),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the parameter file instead of writing it"),
    ] = False,
) -> None:
    """Submit a configuration and write its parameter file.

    Configurations with validation errors are refused.

    Examples:
        booths export lobby-booth.json
        booths export lobby-booth.json --output-dir orders/
        booths export lobby-booth.json --stdout
    """
    order = open_order(config_file)
    command = get_factory().create_export_command()

    try:
        export = command.execute(
            order.template, order.customer, order.config, datetime.now()
        )
    except SubmissionBlockedError as e:
        typer.echo("Cannot submit configuration:", err=True)
        for error in e.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    if stdout:
        exporter = ExporterRegistry.get("params")()
        typer.echo(exporter.export_string(export), nl=False)
        return

    out_dir = output_dir or Path(".")
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        path = ExportManager(out_dir).export_single("params", export)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Parameter file: {path}")
