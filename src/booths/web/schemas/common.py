"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class TemplateSchema(BaseModel):
    """Catalog booth template."""

    id: str = Field(..., description="Template id")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Template description")
    base_price_rate: float = Field(..., description="Price per linear foot")
    icon: str = Field(default="", description="Display icon")


class MaterialOptionSchema(BaseModel):
    """Catalog material option."""

    value: str = Field(..., description="Option value used in configurations")
    label: str = Field(..., description="Display label")
    multiplier: float = Field(..., description="Price multiplier")


class ValidationMessageSchema(BaseModel):
    """A validation error or warning."""

    path: str = Field(..., description="Dotted path to the field")
    field: str | None = Field(
        default=None, description="Booth configuration field, if the finding has one"
    )
    message: str = Field(..., description="Human-readable message")
    suggestion: str | None = Field(default=None, description="Suggested fix")
