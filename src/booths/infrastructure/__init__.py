"""Infrastructure layer - exporters and text formatters."""

from .exporters import ExporterRegistry, ExportManager, ParameterFileExporter
from .formatters import (
    CatalogFormatter,
    PriceBreakdownFormatter,
    QuoteSummaryFormatter,
    ReviewFormatter,
    format_currency,
)

__all__ = [
    "CatalogFormatter",
    "ExportManager",
    "ExporterRegistry",
    "ParameterFileExporter",
    "PriceBreakdownFormatter",
    "QuoteSummaryFormatter",
    "ReviewFormatter",
    "format_currency",
]
