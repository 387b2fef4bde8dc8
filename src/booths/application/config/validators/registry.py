"""The set of checks every booth configuration goes through."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from .base import ValidationResult

if TYPE_CHECKING:
    from booths.contracts.validators import Validator
    from booths.domain.entities import BoothConfiguration

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Process-wide validators run by validate_booth().

    Validators run in name order, so "dimensions" errors always come before
    the "materials" warnings. A validator that raises becomes an error
    finding, which also blocks submission of the configuration.
    """

    _validators: ClassVar[dict[str, Validator]] = {}

    @classmethod
    def register(cls, validator: Validator) -> None:
        """Add a validator, replacing any registered under the same name."""
        if validator.name in cls._validators:
            logger.warning(f"Replacing validator '{validator.name}'")
        cls._validators[validator.name] = validator

    @classmethod
    def available(cls) -> list[str]:
        """Registered validator names in run order."""
        return sorted(cls._validators)

    @classmethod
    def validate_all(cls, config: BoothConfiguration) -> ValidationResult:
        result = ValidationResult()
        for name in cls.available():
            try:
                result.merge(cls._validators[name].validate(config))
            except Exception as e:
                logger.error(f"Validator '{name}' raised: {e}")
                result.add_error(None, f"Validator '{name}' failed: {e}")
        return result

    @classmethod
    def clear(cls) -> None:
        cls._validators.clear()

    @classmethod
    def reset_defaults(cls) -> None:
        """Restore the built-in dimension and material validators."""
        from .dimensions import DimensionValidator
        from .materials import MaterialReferenceValidator

        cls.clear()
        cls.register(DimensionValidator())
        cls.register(MaterialReferenceValidator())
