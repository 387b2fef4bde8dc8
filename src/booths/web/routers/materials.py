"""Material catalog endpoints."""

from fastapi import APIRouter

from booths.domain.value_objects import MaterialCategory
from booths.web.dependencies import ServiceFactoryDep
from booths.web.schemas.common import MaterialOptionSchema
from booths.web.schemas.responses import MaterialListSchema

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=MaterialListSchema)
async def list_materials(factory: ServiceFactoryDep) -> MaterialListSchema:
    """List wood, fabric, and finish options with their multipliers."""
    materials = {
        category.value: [
            MaterialOptionSchema(
                value=option.value, label=option.label, multiplier=option.multiplier
            )
            for option in factory.catalog.options(category)
        ]
        for category in MaterialCategory
    }
    return MaterialListSchema(materials=materials)
