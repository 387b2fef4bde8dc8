"""Pydantic request schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    """Request for quoting an order configuration."""

    config: dict[str, Any] = Field(..., description="Order configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating an order configuration."""

    config: dict[str, Any] = Field(..., description="Order configuration JSON")


class ExportRequest(BaseModel):
    """Request for exporting an order as a parameter file."""

    config: dict[str, Any] = Field(..., description="Order configuration JSON")
    timestamp: datetime | None = Field(
        default=None, description="Submission time (defaults to now)"
    )
