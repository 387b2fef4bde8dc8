"""Pydantic schemas for the REST API."""

from booths.web.schemas.common import (
    MaterialOptionSchema,
    TemplateSchema,
    ValidationMessageSchema,
)
from booths.web.schemas.requests import (
    ConfigValidateRequest,
    ExportRequest,
    QuoteRequest,
)
from booths.web.schemas.responses import (
    ErrorResponseSchema,
    MaterialListSchema,
    PriceBreakdownSchema,
    QuoteResponseSchema,
    TemplateDetailSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "MaterialOptionSchema",
    "TemplateSchema",
    "ValidationMessageSchema",
    # Requests
    "ConfigValidateRequest",
    "ExportRequest",
    "QuoteRequest",
    # Responses
    "ErrorResponseSchema",
    "MaterialListSchema",
    "PriceBreakdownSchema",
    "QuoteResponseSchema",
    "TemplateDetailSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
