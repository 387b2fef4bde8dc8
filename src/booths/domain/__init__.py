"""Domain layer - core business logic."""

from .catalog import DEFAULT_CATALOG, Catalog
from .entities import BoothConfiguration
from .services import (
    PARAMETER_KEYS,
    ParameterFileError,
    ParameterRecord,
    PriceBreakdown,
    PricingEngine,
    calculate_price,
    parse_parameter_file,
    price_breakdown,
    serialize_parameters,
    validate,
)
from .value_objects import Customer, MaterialCategory, MaterialOption, Template

__all__ = [
    "BoothConfiguration",
    "Catalog",
    "Customer",
    "DEFAULT_CATALOG",
    "MaterialCategory",
    "MaterialOption",
    "PARAMETER_KEYS",
    "ParameterFileError",
    "ParameterRecord",
    "PriceBreakdown",
    "PricingEngine",
    "Template",
    "calculate_price",
    "parse_parameter_file",
    "price_breakdown",
    "serialize_parameters",
    "validate",
]
