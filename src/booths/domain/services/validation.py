"""Dimension rules for booth configurations.

Each rule is an inclusive range check on one field. All rules are always
evaluated; the result lists one message per failed rule, in rule order.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import BoothConfiguration


@dataclass(frozen=True)
class DimensionRule:
    """Inclusive range rule for a single numeric field."""

    field: str
    minimum: float
    maximum: float
    message: str

    def check(self, config: BoothConfiguration) -> bool:
        """True if the configuration satisfies this rule."""
        value = getattr(config, self.field)
        return self.minimum <= value <= self.maximum


DIMENSION_RULES: tuple[DimensionRule, ...] = (
    DimensionRule(
        field="overall_length",
        minimum=24,
        maximum=144,
        message='Overall length must be between 24" and 144"',
    ),
    DimensionRule(
        field="seat_height",
        minimum=16,
        maximum=20,
        message='Seat height should be between 16" and 20" for ergonomics',
    ),
    DimensionRule(
        field="seat_depth",
        minimum=16,
        maximum=22,
        message='Seat depth should be between 16" and 22"',
    ),
)


def failed_rules(
    config: BoothConfiguration,
    rules: tuple[DimensionRule, ...] = DIMENSION_RULES,
) -> list[DimensionRule]:
    """Rules the configuration breaks, in rule order."""
    return [rule for rule in rules if not rule.check(config)]


def validate(config: BoothConfiguration) -> list[str]:
    """Validate booth dimensions.

    Args:
        config: Configuration to check.

    Returns:
        Human-readable error messages; an empty list means valid.
    """
    return [rule.message for rule in failed_rules(config)]
