"""Typer CLI for booth configuration."""

from typing import Annotated

import typer

from booths.application.factory import get_factory
from booths.cli.commands import (
    export_command,
    quote_command,
    templates_app,
    validate_command,
)
from booths.domain.value_objects import MaterialCategory
from booths.infrastructure.formatters import CatalogFormatter

app = typer.Typer(
    name="booths",
    help="Configure upholstered booth seating, price it, and export parameter files.",
)

app.command(name="validate")(validate_command)
app.command(name="quote")(quote_command)
app.command(name="export")(export_command)

app.add_typer(templates_app, name="templates")


@app.command()
def materials(
    category: Annotated[
        MaterialCategory | None,
        typer.Option("--category", "-c", help="Only show one material category"),
    ] = None,
) -> None:
    """List wood, fabric, and finish options with their price multipliers."""
    typer.echo(CatalogFormatter(get_factory().catalog).format_materials(category))


if __name__ == "__main__":
    app()
