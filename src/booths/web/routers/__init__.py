"""API routers for the REST API."""

from booths.web.routers.export import router as export_router
from booths.web.routers.materials import router as materials_router
from booths.web.routers.quote import router as quote_router
from booths.web.routers.templates import router as templates_router
from booths.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "materials_router",
    "quote_router",
    "templates_router",
    "validate_router",
]
