"""Templates commands for listing templates and starting order files."""

from pathlib import Path
from typing import Annotated

import typer

from booths.application.factory import get_factory
from booths.application.templates import TemplateNotFoundError
from booths.infrastructure.formatters import CatalogFormatter

templates_app = typer.Typer(
    name="templates",
    help="List booth templates and create starter order files.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all booth templates with their price per linear foot.

    Example:
        booths templates list
    """
    factory = get_factory()
    typer.echo(CatalogFormatter(factory.catalog).format_templates())
    typer.echo()
    typer.echo("Use 'booths templates init <id>' to create an order file from a template.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Id of the template to start from"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <id>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Create a starter order configuration file for a template.

    Examples:
        booths templates init straight-wood-back
        booths templates init curved-full-upholstered --output corner.json
    """
    manager = get_factory().get_template_manager()

    if output is None:
        output = Path(f"{name}.json")

    try:
        manager.init_config(name, output, overwrite=force)
    except TemplateNotFoundError:
        available = ", ".join(t[0] for t in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)
    except FileExistsError:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output}")
