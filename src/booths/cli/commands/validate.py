"""Validate command for checking order configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from booths.application.config import (
    ValidationResult,
    ValidatorRegistry,
    validate_booth,
)
from booths.cli.commands.orders import open_order


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON order configuration file to validate"),
    ],
) -> None:
    """Validate a booth order configuration file.

    Checks the file for JSON and schema errors, an unknown template,
    out-of-range dimensions, and material values missing from the catalog.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be submitted)
        2 - Configuration is valid but has warnings

    Example:
        booths validate lobby-booth.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo(f"Checks: {', '.join(ValidatorRegistry.available())}")
    typer.echo()

    order = open_order(config_file)
    result = validate_booth(order.config)
    _display_validation_result(result)

    raise typer.Exit(code=result.exit_code)
