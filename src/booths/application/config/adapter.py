"""Conversion from configuration schema models to domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from booths.application.config.schema import BoothConfig, OrderConfiguration
from booths.domain.entities import BoothConfiguration
from booths.domain.value_objects import Customer, Template

if TYPE_CHECKING:
    from booths.application.templates.manager import TemplateManager


def config_to_booth(config: OrderConfiguration | BoothConfig) -> BoothConfiguration:
    """Build the domain booth configuration.

    Accepts either the root order configuration or its booth section.
    """
    booth = config.booth if isinstance(config, OrderConfiguration) else config
    return BoothConfiguration(**booth.model_dump())


def config_to_customer(config: OrderConfiguration) -> Customer:
    return Customer(name=config.customer.name, email=config.customer.email)


def config_to_template(
    config: OrderConfiguration, manager: TemplateManager | None = None
) -> Template:
    """Resolve the configured template id.

    Raises:
        TemplateNotFoundError: If the catalog has no such template.
    """
    if manager is None:
        from booths.application.templates.manager import TemplateManager

        manager = TemplateManager()
    return manager.get_template(config.template)
