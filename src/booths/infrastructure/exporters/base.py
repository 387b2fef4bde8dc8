"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from booths.application.dtos import ParameterExport


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Registry name for the export format (e.g., "params").
        file_extension: File extension without leading dot (e.g., "txt").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, export: ParameterExport, path: Path) -> None:
        """Write a submitted order to a file."""
        ...

    def export_string(self, export: ParameterExport) -> str:
        """Render a submitted order as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("params")
        class ParameterFileExporter:
            format_name = "params"
            file_extension = "txt"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under format_name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters (for tests)."""
        cls._exporters.clear()


class ExportManager:
    """Writes submitted orders to an output directory.

    This is the file-export collaborator: the core produces text, the
    manager owns the file handle.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory for exported files; created on first export.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self, formats: list[str], export: ParameterExport
    ) -> dict[str, Path]:
        """Export a submitted order in several formats.

        Files are named after the export's filename stem with the format's
        extension.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        stem = Path(export.filename).stem
        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{stem}.{exporter.file_extension}"

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(export, filepath)
            results[format_name] = filepath

        return results

    def export_single(self, format_name: str, export: ParameterExport) -> Path:
        """Export a submitted order in one format and return the file path."""
        return self.export_all([format_name], export)[format_name]
