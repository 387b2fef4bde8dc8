"""Template manager for catalog booth templates.

This module provides the TemplateManager class for looking up templates by
id and starting new order configuration files from them.
"""

import json
from pathlib import Path

from booths.application.config.schema import OrderConfiguration
from booths.domain.catalog import DEFAULT_CATALOG, Catalog
from booths.domain.value_objects import Template


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class TemplateManager:
    """Lookup and starter-file access for booth templates.

    Example:
        manager = TemplateManager()
        for template_id, name, description in manager.list_templates():
            print(f"{template_id}: {name}")

        manager.init_config("straight-wood-back", Path("lobby-booth.json"))
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def list_templates(self) -> list[tuple[str, str, str]]:
        """List (id, name, description) for every template in catalog order."""
        return [(t.id, t.name, t.description) for t in self.catalog.templates]

    def get_template(self, name: str) -> Template:
        """Get a template by id.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        template = self.catalog.get_template(name)
        if template is None:
            raise TemplateNotFoundError(name)
        return template

    def template_exists(self, name: str) -> bool:
        return self.catalog.get_template(name) is not None

    def starter_config(self, name: str) -> OrderConfiguration:
        """Default order configuration for a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        template = self.get_template(name)
        return OrderConfiguration(schema_version="1.0", template=template.id)

    def init_config(self, name: str, output_path: Path, overwrite: bool = False) -> None:
        """Write a starter order configuration for a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and overwrite is False.
        """
        config = self.starter_config(name)
        if output_path.exists() and not overwrite:
            raise FileExistsError(f"File already exists: {output_path}")
        content = json.dumps(config.model_dump(mode="json"), indent=2) + "\n"
        output_path.write_text(content, encoding="utf-8")
