"""Opening order configuration files for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from booths.application.config import ConfigError, LoadedOrder, load_order
from booths.application.factory import get_factory
from booths.application.templates import TemplateNotFoundError


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail['line']}, Column {detail['column']}: {detail['message']}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
            if detail["value"] is not None:
                typer.echo(f"    Value: {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def open_order(config_file: Path) -> LoadedOrder:
    """Load an order file, exiting with code 1 on any loading problem."""
    manager = get_factory().get_template_manager()
    try:
        return load_order(config_file, manager)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except TemplateNotFoundError as e:
        available = ", ".join(entry[0] for entry in manager.list_templates())
        typer.echo("Errors:", err=True)
        typer.echo(f"  template: {e}", err=True)
        typer.echo(f"  Available templates: {available}", err=True)
        raise typer.Exit(code=1)
