"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from booths.domain.catalog import DEFAULT_CATALOG, Catalog

if TYPE_CHECKING:
    from booths.application.commands import ExportParametersCommand, QuoteBoothCommand
    from booths.application.session import BoothSession
    from booths.application.templates.manager import TemplateManager
    from booths.domain.services.pricing import PricingEngine
    from booths.domain.value_objects import Customer


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes construction so the CLI, the web API, and tests share one
    catalog and can swap services for testing.

    Example:
        ```python
        factory = ServiceFactory()
        quote = factory.create_quote_command().execute(template, config)
        ```
    """

    catalog: Catalog = DEFAULT_CATALOG

    _pricing_engine: "PricingEngine | None" = field(
        default=None, init=False, repr=False
    )

    def get_pricing_engine(self) -> "PricingEngine":
        """Get or create the pricing engine."""
        if self._pricing_engine is None:
            from booths.domain.services.pricing import PricingEngine

            self._pricing_engine = PricingEngine(self.catalog)
        return self._pricing_engine

    def get_template_manager(self) -> "TemplateManager":
        from booths.application.templates.manager import TemplateManager

        return TemplateManager(self.catalog)

    def create_quote_command(self) -> "QuoteBoothCommand":
        from booths.application.commands import QuoteBoothCommand

        return QuoteBoothCommand(
            pricing_engine=self.get_pricing_engine(), catalog=self.catalog
        )

    def create_export_command(self) -> "ExportParametersCommand":
        from booths.application.commands import ExportParametersCommand

        return ExportParametersCommand(self.create_quote_command())

    def create_session(self, customer: "Customer | None" = None) -> "BoothSession":
        """Create a wizard session wired to this factory's services."""
        from booths.application.commands import ExportParametersCommand
        from booths.application.session import BoothSession

        quote_command = self.create_quote_command()
        return BoothSession(
            customer=customer,
            template_manager=self.get_template_manager(),
            quote_command=quote_command,
            export_command=ExportParametersCommand(quote_command),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
