"""Unit tests for ValidatorRegistry and validate_booth."""

from __future__ import annotations

from booths.application.config.validators import (
    DimensionValidator,
    MaterialReferenceValidator,
    ValidationResult,
    ValidatorRegistry,
    validate_booth,
)
from booths.contracts import Validator
from booths.domain.catalog import Catalog
from booths.domain.entities import BoothConfiguration


class _FailingValidator:
    @property
    def name(self) -> str:
        return "failing"

    def validate(self, config: BoothConfiguration) -> ValidationResult:
        raise RuntimeError("boom")


class _NoteValidator:
    @property
    def name(self) -> str:
        return "notes"

    def validate(self, config: BoothConfiguration) -> ValidationResult:
        return ValidationResult().add_warning("cushion_thickness", "note")


class TestValidatorRegistry:
    """Tests for registering and running validators."""

    def test_defaults_registered(self) -> None:
        """Test that the dimension and material checks are registered."""
        assert ValidatorRegistry.available() == ["dimensions", "materials"]

    def test_register_and_run(self) -> None:
        """Test that a newly registered validator runs with the others."""
        ValidatorRegistry.register(_NoteValidator())
        result = ValidatorRegistry.validate_all(BoothConfiguration())
        assert result.warning_messages == ["note"]

    def test_register_same_name_replaces(self) -> None:
        """Test that registering under an existing name replaces it."""
        ValidatorRegistry.register(MaterialReferenceValidator(Catalog(materials={})))
        result = ValidatorRegistry.validate_all(BoothConfiguration())
        assert ValidatorRegistry.available() == ["dimensions", "materials"]
        assert len(result.warnings) == 3

    def test_raising_validator_blocks_submission(self) -> None:
        """Test that a crashing validator is reported as a general error."""
        ValidatorRegistry.register(_FailingValidator())
        result = ValidatorRegistry.validate_all(BoothConfiguration())
        assert len(result.errors) == 1
        assert result.errors[0].field_name is None
        assert result.errors[0].path == "validation"
        assert "boom" in result.errors[0].message
        assert not result.is_valid

    def test_reset_defaults_restores_state(self) -> None:
        """Test that reset_defaults undoes clear()."""
        ValidatorRegistry.clear()
        assert ValidatorRegistry.available() == []
        ValidatorRegistry.reset_defaults()
        assert ValidatorRegistry.available() == ["dimensions", "materials"]


class TestValidateBooth:
    """Tests for the combined validation entry point."""

    def test_errors_before_warnings(self) -> None:
        """Test dimension errors alongside a material warning."""
        result = validate_booth(BoothConfiguration(seat_height=10, wood_type="teak"))
        assert result.messages == [
            'Seat height should be between 16" and 20" for ergonomics'
        ]
        assert len(result.warnings) == 1
        assert result.exit_code == 1

    def test_custom_catalog_checks_materials_against_it(self) -> None:
        """Test that a custom catalog replaces the default material check."""
        result = validate_booth(BoothConfiguration(), Catalog(materials={}))
        assert result.is_valid
        assert len(result.warnings) == 3


class TestValidatorProtocol:
    """Tests for the Validator protocol."""

    def test_builtin_validators_satisfy_protocol(self) -> None:
        """Test that built-in and ad hoc validators match the protocol."""
        assert isinstance(DimensionValidator(), Validator)
        assert isinstance(MaterialReferenceValidator(), Validator)
        assert isinstance(_NoteValidator(), Validator)
