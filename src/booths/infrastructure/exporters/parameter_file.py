"""Parameter file exporter for fabrication intake."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from booths.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from booths.application.dtos import ParameterExport

logger = logging.getLogger(__name__)


@ExporterRegistry.register("params")
class ParameterFileExporter:
    """Writes the key=value parameter file as UTF-8 text."""

    format_name: ClassVar[str] = "params"
    file_extension: ClassVar[str] = "txt"

    def export(self, export: ParameterExport, path: Path) -> None:
        # newline="" keeps "\n" line endings on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(export.content)
        logger.debug(f"Wrote {len(export.content)} characters to {path}")

    def export_string(self, export: ParameterExport) -> str:
        return export.content
