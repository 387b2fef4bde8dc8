"""CLI command implementations for the booths application.

This package contains subcommands for the booths CLI, including:
- validate: Validate an order configuration file
- templates: List templates and create starter order files
- quote / export: Price a configuration and write its parameter file
"""

from booths.cli.commands.quote import export_command, quote_command
from booths.cli.commands.templates import templates_app
from booths.cli.commands.validate import validate_command

__all__ = ["export_command", "quote_command", "templates_app", "validate_command"]
