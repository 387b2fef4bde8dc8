"""Configuration schema and loading for booth orders.

Public API:
    - OrderConfiguration: Root configuration model
    - BoothConfig: Booth dimensions and materials model
    - CustomerConfig: Customer contact model
    - load_order / load_order_from_dict: Read an order and resolve its template
    - load_config / load_config_from_dict: Schema-check an order only
    - LoadedOrder: Template, customer and booth configuration of an order
    - ConfigError: Exception for configuration errors
    - ValidationResult, ValidationError, ValidationWarning: validation results
    - validate_booth: Run all validators against a booth configuration

Example:
    >>> from pathlib import Path
    >>> from booths.application.config import load_order, ConfigError
    >>>
    >>> try:
    ...     order = load_order(Path("lobby-booth.json"))
    ...     print(f"Booth length: {order.config.overall_length}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from booths.application.config.adapter import (
    config_to_booth,
    config_to_customer,
    config_to_template,
)
from booths.application.config.loader import (
    ConfigError,
    LoadedOrder,
    load_config,
    load_config_from_dict,
    load_order,
    load_order_from_dict,
    resolve_order,
)
from booths.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoothConfig,
    CustomerConfig,
    OrderConfiguration,
)
from booths.application.config.validators import (
    DimensionValidator,
    MaterialReferenceValidator,
    SubmissionBlockedError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    ValidatorRegistry,
    validate_booth,
)

__all__ = [
    "BoothConfig",
    "ConfigError",
    "CustomerConfig",
    "DimensionValidator",
    "LoadedOrder",
    "MaterialReferenceValidator",
    "OrderConfiguration",
    "SUPPORTED_VERSIONS",
    "SubmissionBlockedError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "config_to_booth",
    "config_to_customer",
    "config_to_template",
    "load_config",
    "load_config_from_dict",
    "load_order",
    "load_order_from_dict",
    "resolve_order",
    "validate_booth",
]
