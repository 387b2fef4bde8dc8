"""Exporter framework for submitted booth orders.

Registered exporters:
- params: key=value parameter file for fabrication intake

Usage:
    from booths.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./orders"))
    path = manager.export_single("params", parameter_export)
"""

from booths.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from booths.infrastructure.exporters.parameter_file import ParameterFileExporter

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "ParameterFileExporter",
]
