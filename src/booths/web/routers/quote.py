"""Quote endpoints."""

from fastapi import APIRouter

from booths.application.config import load_order_from_dict
from booths.web.dependencies import QuoteCommandDep, TemplateManagerDep
from booths.web.schemas.requests import QuoteRequest
from booths.web.schemas.responses import PriceBreakdownSchema, QuoteResponseSchema

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post("", response_model=QuoteResponseSchema)
async def quote_configuration(
    request: QuoteRequest,
    command: QuoteCommandDep,
    manager: TemplateManagerDep,
) -> QuoteResponseSchema:
    """Validate and price an order configuration.

    Invalid configurations are still priced; the response lists the
    errors and marks the quote as not submittable.
    """
    order = load_order_from_dict(request.config, manager)
    quote = command.execute(order.template, order.config)
    breakdown = quote.breakdown

    return QuoteResponseSchema(
        template_id=order.template.id,
        is_valid=quote.is_valid,
        errors=quote.errors,
        warnings=quote.warnings,
        estimated_price=quote.estimated_price,
        rounded_price=quote.rounded_price,
        breakdown=PriceBreakdownSchema(
            linear_feet=breakdown.linear_feet,
            base_price=breakdown.base_price,
            wood_multiplier=breakdown.wood_multiplier,
            fabric_multiplier=breakdown.fabric_multiplier,
            finish_multiplier=breakdown.finish_multiplier,
            segment_multiplier=breakdown.segment_multiplier,
            height_multiplier=breakdown.height_multiplier,
            adjustment_percent=breakdown.adjustment_percent,
        ),
    )
