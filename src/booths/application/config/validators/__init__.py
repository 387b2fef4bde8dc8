"""Validators subpackage - modular validators for booth configurations.

- DimensionValidator: seat and length ranges (blocking errors)
- MaterialReferenceValidator: material values missing from the catalog (warnings)

The ValidatorRegistry holds the active validators and runs them together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import (
    SubmissionBlockedError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from .dimensions import DimensionValidator
from .materials import MATERIAL_FIELD_CATEGORIES, MaterialReferenceValidator
from .registry import ValidatorRegistry

if TYPE_CHECKING:
    from booths.domain.catalog import Catalog
    from booths.domain.entities import BoothConfiguration

ValidatorRegistry.reset_defaults()


def validate_booth(
    config: "BoothConfiguration", catalog: "Catalog | None" = None
) -> ValidationResult:
    """Run every check for a configuration.

    With the default catalog this runs the registered validators. A custom
    catalog gets its own material check alongside the dimension rules.
    """
    if catalog is None:
        return ValidatorRegistry.validate_all(config)
    result = DimensionValidator().validate(config)
    return result.merge(MaterialReferenceValidator(catalog).validate(config))


__all__ = [
    "MATERIAL_FIELD_CATEGORIES",
    "DimensionValidator",
    "MaterialReferenceValidator",
    "SubmissionBlockedError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "validate_booth",
]
