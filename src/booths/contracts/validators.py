"""Validator protocol for booth configuration validation.

This module defines the protocol that all validators must implement,
enabling consistent validation across different validation concerns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from booths.application.config.validators.base import ValidationResult
    from booths.domain.entities import BoothConfiguration


@runtime_checkable
class Validator(Protocol):
    """Protocol for booth configuration validators.

    Validators check one aspect of a BoothConfiguration and return a
    ValidationResult containing any errors or warnings found.

    Attributes:
        name: Unique identifier for the validator (e.g., "dimensions").

    Example:
        class CushionValidator:
            @property
            def name(self) -> str:
                return "cushion"

            def validate(self, config: BoothConfiguration) -> ValidationResult:
                result = ValidationResult()
                if config.cushion_thickness > 6:
                    result.add_warning("cushion_thickness", "Unusually thick cushion")
                return result
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(self, config: BoothConfiguration) -> ValidationResult:
        """Validate the given configuration.

        Args:
            config: A BoothConfiguration instance to validate.

        Returns:
            ValidationResult containing any errors or warnings found.
        """
        ...
