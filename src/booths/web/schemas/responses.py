"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from booths.web.schemas.common import (
    MaterialOptionSchema,
    TemplateSchema,
    ValidationMessageSchema,
)


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateSchema] = Field(..., description="Available templates")


class TemplateDetailSchema(BaseModel):
    """Response for a single template and its starter configuration."""

    template: TemplateSchema = Field(..., description="Template details")
    starter_config: dict[str, Any] = Field(
        ..., description="Default order configuration for the template"
    )


class MaterialListSchema(BaseModel):
    """Response for material listing, keyed by category."""

    materials: dict[str, list[MaterialOptionSchema]] = Field(
        ..., description="Options by category (wood, fabric, finish)"
    )


class PriceBreakdownSchema(BaseModel):
    """Pricing factors behind an estimate."""

    linear_feet: float = Field(..., description="Overall length in feet")
    base_price: float = Field(..., description="Linear feet times template rate")
    wood_multiplier: float
    fabric_multiplier: float
    finish_multiplier: float
    segment_multiplier: float
    height_multiplier: float
    adjustment_percent: int = Field(..., description="Total adjustment over base")


class QuoteResponseSchema(BaseModel):
    """Response for a quote."""

    template_id: str = Field(..., description="Quoted template id")
    is_valid: bool = Field(..., description="Whether the configuration can be submitted")
    errors: list[str] = Field(default_factory=list, description="Validation errors")
    warnings: list[str] = Field(default_factory=list, description="Validation warnings")
    estimated_price: float = Field(..., description="Unrounded estimate")
    rounded_price: int = Field(..., description="Estimate rounded to whole currency")
    breakdown: PriceBreakdownSchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[ValidationMessageSchema] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[ValidationMessageSchema] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
