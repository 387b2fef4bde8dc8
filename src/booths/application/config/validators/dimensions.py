"""Dimension range validator."""

from __future__ import annotations

from booths.domain.entities import BoothConfiguration
from booths.domain.services.validation import DIMENSION_RULES, failed_rules

from .base import ValidationResult


class DimensionValidator:
    """Reports one error per broken dimension rule.

    Messages match booths.domain.services.validate() exactly; this class
    only adds the field name and offending value.
    """

    @property
    def name(self) -> str:
        return "dimensions"

    def validate(self, config: BoothConfiguration) -> ValidationResult:
        result = ValidationResult()
        for rule in failed_rules(config, DIMENSION_RULES):
            result.add_error(
                rule.field, rule.message, value=getattr(config, rule.field)
            )
        return result
