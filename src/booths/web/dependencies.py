"""FastAPI dependency injection for booth services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from booths.application.commands import ExportParametersCommand, QuoteBoothCommand
from booths.application.factory import ServiceFactory, get_factory
from booths.application.templates.manager import TemplateManager


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_quote_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> QuoteBoothCommand:
    """Dependency for QuoteBoothCommand."""
    return factory.create_quote_command()


def get_export_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> ExportParametersCommand:
    """Dependency for ExportParametersCommand."""
    return factory.create_export_command()


def get_template_manager(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> TemplateManager:
    """Dependency for TemplateManager."""
    return factory.get_template_manager()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
QuoteCommandDep = Annotated[QuoteBoothCommand, Depends(get_quote_command)]
ExportCommandDep = Annotated[ExportParametersCommand, Depends(get_export_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
