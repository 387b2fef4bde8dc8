"""Template catalog endpoints."""

from fastapi import APIRouter

from booths.domain.value_objects import Template
from booths.web.dependencies import TemplateManagerDep
from booths.web.schemas.common import TemplateSchema
from booths.web.schemas.responses import TemplateDetailSchema, TemplateListSchema

router = APIRouter(prefix="/templates", tags=["templates"])


def _template_schema(template: Template) -> TemplateSchema:
    return TemplateSchema(
        id=template.id,
        name=template.name,
        description=template.description,
        base_price_rate=template.base_price_rate,
        icon=template.icon,
    )


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List all booth templates in catalog order."""
    templates = [
        _template_schema(manager.get_template(template_id))
        for template_id, _, _ in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{template_id}", response_model=TemplateDetailSchema)
async def get_template(
    template_id: str,
    manager: TemplateManagerDep,
) -> TemplateDetailSchema:
    """Get a template and its starter order configuration.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    template = manager.get_template(template_id)
    starter = manager.starter_config(template_id)
    return TemplateDetailSchema(
        template=_template_schema(template),
        starter_config=starter.model_dump(mode="json"),
    )
