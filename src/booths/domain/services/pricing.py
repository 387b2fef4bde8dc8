"""Booth price estimation.

The estimate is a product of a per-linear-foot base price and a chain of
dimensionless multipliers. The multiplication order is fixed so results are
bit-reproducible:

    base * wood * fabric * finish * segments * height

No rounding happens here; callers round for display or export.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..catalog import DEFAULT_CATALOG, Catalog
from ..entities import INCHES_PER_FOOT, BoothConfiguration
from ..value_objects import MaterialCategory, Template
from .rounding import round_half_away_from_zero

logger = logging.getLogger(__name__)

# Surcharge for each segment beyond the first (linear, not compounding).
SEGMENT_SURCHARGE = 0.15

# Backs taller than this (inches) take the tall-back multiplier.
TALL_BACK_THRESHOLD = 48
TALL_BACK_MULTIPLIER = 1.1


@dataclass(frozen=True)
class PriceBreakdown:
    """Every factor of a price estimate, for review screens and audits.

    Attributes:
        template_id: Template the estimate was computed for (None if unset).
        linear_feet: Overall length / 12.
        base_price: Template rate times linear feet.
        wood_multiplier: Wood option multiplier (1.0 when unresolved).
        fabric_multiplier: Upholstery option multiplier.
        finish_multiplier: Finish option multiplier.
        segment_multiplier: 1 + 0.15 per additional segment.
        height_multiplier: 1.1 for tall backs, else 1.0.
        total: Unrounded estimate, identical to calculate_price().
    """

    template_id: str | None
    linear_feet: float
    base_price: float
    wood_multiplier: float
    fabric_multiplier: float
    finish_multiplier: float
    segment_multiplier: float
    height_multiplier: float
    total: float

    @property
    def rounded_total(self) -> int:
        """Total rounded to a whole currency unit."""
        return round_half_away_from_zero(self.total)

    @property
    def rounded_base_price(self) -> int:
        """Base price rounded to a whole currency unit."""
        return round_half_away_from_zero(self.base_price)

    @property
    def adjustment_percent(self) -> int:
        """Combined effect of all multipliers as a whole percentage."""
        if self.base_price == 0:
            return 0
        return round_half_away_from_zero((self.total / self.base_price - 1) * 100)


def segment_multiplier(number_of_segments: int) -> float:
    """1.0 for one segment, plus SEGMENT_SURCHARGE per extra segment."""
    return 1 + (number_of_segments - 1) * SEGMENT_SURCHARGE


def height_multiplier(overall_height: float) -> float:
    """Single-step surcharge for tall backs."""
    return TALL_BACK_MULTIPLIER if overall_height > TALL_BACK_THRESHOLD else 1.0


def price_breakdown(
    template: Template | None,
    config: BoothConfiguration,
    catalog: Catalog = DEFAULT_CATALOG,
) -> PriceBreakdown:
    """Compute every pricing factor for a configuration.

    With no template selected the estimate is zero rather than an error,
    matching the wizard's state before a template is picked.
    """
    linear_feet = config.overall_length / INCHES_PER_FOOT
    wood_mult = catalog.multiplier(MaterialCategory.WOOD, config.wood_type)
    fabric_mult = catalog.multiplier(MaterialCategory.FABRIC, config.fabric_type)
    finish_mult = catalog.multiplier(MaterialCategory.FINISH, config.wood_finish)
    segment_mult = segment_multiplier(config.number_of_segments)
    height_mult = height_multiplier(config.overall_height)

    if template is None:
        return PriceBreakdown(
            template_id=None,
            linear_feet=linear_feet,
            base_price=0.0,
            wood_multiplier=wood_mult,
            fabric_multiplier=fabric_mult,
            finish_multiplier=finish_mult,
            segment_multiplier=segment_mult,
            height_multiplier=height_mult,
            total=0.0,
        )

    base = template.base_price_rate * linear_feet
    total = base * wood_mult * fabric_mult * finish_mult * segment_mult * height_mult
    logger.debug(
        f"Priced '{template.id}': base={base} wood={wood_mult} fabric={fabric_mult} "
        f"finish={finish_mult} segments={segment_mult} height={height_mult} -> {total}"
    )
    return PriceBreakdown(
        template_id=template.id,
        linear_feet=linear_feet,
        base_price=base,
        wood_multiplier=wood_mult,
        fabric_multiplier=fabric_mult,
        finish_multiplier=finish_mult,
        segment_multiplier=segment_mult,
        height_multiplier=height_mult,
        total=total,
    )


def calculate_price(
    template: Template | None,
    config: BoothConfiguration,
    catalog: Catalog = DEFAULT_CATALOG,
) -> float:
    """Estimated price for a configuration, unrounded.

    Returns 0.0 when no template is selected. Out-of-range dimensions still
    price; flagging them is the validator's job.
    """
    return price_breakdown(template, config, catalog).total


class PricingEngine:
    """Pricing bound to a specific catalog."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def price(self, template: Template | None, config: BoothConfiguration) -> float:
        return calculate_price(template, config, self.catalog)

    def breakdown(
        self, template: Template | None, config: BoothConfiguration
    ) -> PriceBreakdown:
        return price_breakdown(template, config, self.catalog)
