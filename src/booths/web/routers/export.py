"""Parameter file export endpoints."""

from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import Response

from booths.application.config import load_order_from_dict
from booths.infrastructure.exporters import ExporterRegistry
from booths.web.dependencies import ExportCommandDep, TemplateManagerDep
from booths.web.schemas.requests import ExportRequest

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats")
async def list_export_formats() -> dict[str, list[str]]:
    """List the registered export formats."""
    return {"formats": ExporterRegistry.available_formats()}


@router.post("")
async def export_parameter_file(
    request: ExportRequest,
    command: ExportCommandDep,
    manager: TemplateManagerDep,
) -> Response:
    """Submit an order configuration and download its parameter file.

    Raises:
        SubmissionBlockedError: If the configuration has validation errors
            (handled by exception handler).
    """
    order = load_order_from_dict(request.config, manager)
    export = command.execute(
        order.template,
        order.customer,
        order.config,
        request.timestamp or datetime.now(),
    )

    exporter = ExporterRegistry.get("params")()
    return Response(
        content=exporter.export_string(export),
        media_type="text/plain",
        headers={"Content-Disposition": f"attachment; filename={export.filename}"},
    )
