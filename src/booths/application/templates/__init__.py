"""Booth templates and starter configurations.

This package wraps the catalog's templates with id lookup and a
TemplateManager for creating starter order configuration files.
"""

from booths.application.templates.manager import (
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TemplateManager",
    "TemplateNotFoundError",
]
