"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from booths.application.config.validators import ValidationResult
from booths.domain.entities import BoothConfiguration
from booths.domain.services.parameter_file import ParameterRecord
from booths.domain.services.pricing import PriceBreakdown
from booths.domain.value_objects import Customer, Template


@dataclass
class QuoteOutput:
    """Derived state for one configuration snapshot.

    This is everything the wizard redraws after an edit: validation
    findings and the price estimate.
    """

    template: Template | None
    config: BoothConfiguration
    breakdown: PriceBreakdown
    validation: ValidationResult = field(default_factory=ValidationResult)

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    @property
    def errors(self) -> list[str]:
        return self.validation.messages

    @property
    def warnings(self) -> list[str]:
        return self.validation.warning_messages

    @property
    def estimated_price(self) -> float:
        return self.breakdown.total

    @property
    def rounded_price(self) -> int:
        return self.breakdown.rounded_total


@dataclass(frozen=True)
class ParameterExport:
    """A submitted order ready for the file-export collaborator.

    Attributes:
        template: Template the order was built from.
        customer: Customer the order belongs to.
        config: Configuration snapshot at submission time.
        estimated_price: Unrounded estimate.
        timestamp: Submission time.
        record: Ordered key/value record.
        content: Rendered parameter file text.
        filename: Suggested download name.
    """

    template: Template
    customer: Customer
    config: BoothConfiguration
    estimated_price: float
    timestamp: datetime
    record: ParameterRecord
    content: str
    filename: str
