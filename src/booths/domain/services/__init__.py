"""Domain services: pricing, dimension validation, and parameter files."""

from .parameter_file import (
    PARAMETER_KEYS,
    ParameterFileError,
    ParameterRecord,
    build_parameter_record,
    parameter_filename,
    parse_parameter_file,
    serialize_parameters,
)
from .pricing import PriceBreakdown, PricingEngine, calculate_price, price_breakdown
from .rounding import format_fixed, format_number, round_half_away_from_zero
from .validation import DIMENSION_RULES, DimensionRule, failed_rules, validate

__all__ = [
    "DIMENSION_RULES",
    "DimensionRule",
    "PARAMETER_KEYS",
    "ParameterFileError",
    "ParameterRecord",
    "PriceBreakdown",
    "PricingEngine",
    "build_parameter_record",
    "calculate_price",
    "failed_rules",
    "format_fixed",
    "format_number",
    "parameter_filename",
    "parse_parameter_file",
    "price_breakdown",
    "round_half_away_from_zero",
    "serialize_parameters",
    "validate",
]
