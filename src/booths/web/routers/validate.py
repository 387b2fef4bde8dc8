"""Configuration validation endpoints."""

from fastapi import APIRouter

from booths.application.config import load_order_from_dict
from booths.web.dependencies import QuoteCommandDep, TemplateManagerDep
from booths.web.schemas.common import ValidationMessageSchema
from booths.web.schemas.requests import ConfigValidateRequest
from booths.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    command: QuoteCommandDep,
    manager: TemplateManagerDep,
) -> ValidationResultSchema:
    """Validate an order configuration.

    Schema problems are reported by the ConfigError handler (422) and an
    unknown template by the TemplateNotFoundError handler (404).
    """
    order = load_order_from_dict(request.config, manager)
    result = command.execute(order.template, order.config).validation

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            ValidationMessageSchema(
                path=e.path, field=e.field_name, message=e.message
            )
            for e in result.errors
        ],
        warnings=[
            ValidationMessageSchema(
                path=w.path,
                field=w.field_name,
                message=w.message,
                suggestion=w.suggestion,
            )
            for w in result.warnings
        ],
    )
