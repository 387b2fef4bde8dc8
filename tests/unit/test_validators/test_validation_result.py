"""Unit tests for ValidationResult and its findings."""

from __future__ import annotations

import pytest

from booths.application.config.validators import (
    SubmissionBlockedError,
    ValidationResult,
)


class TestFindings:
    """Tests for field names and paths on findings."""

    def test_field_path(self) -> None:
        """Test that a field finding points into the booth section."""
        result = ValidationResult().add_error("seat_depth", "too deep", 30)
        assert result.errors[0].path == "booth.seat_depth"
        assert result.errors[0].value == 30

    def test_general_path(self) -> None:
        """Test the path of a finding with no field."""
        result = ValidationResult().add_warning(None, "check manually")
        assert result.warnings[0].path == "validation"


class TestValidationResult:
    """Tests for the submit gate and exit codes."""

    def test_empty_result(self) -> None:
        """Test that an empty result is valid with exit code 0."""
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0
        result.ensure_submittable()

    def test_warnings_do_not_block(self) -> None:
        """Test that warnings alone give exit code 2 and still submit."""
        result = ValidationResult().add_warning("wood_type", "unknown", "teak")
        assert result.exit_code == 2
        assert result.warning_messages == ["unknown"]
        result.ensure_submittable()

    def test_errors_block_submission(self) -> None:
        """Test that ensure_submittable lists every error."""
        result = (
            ValidationResult()
            .add_error("overall_length", "too short")
            .add_error("seat_height", "too low")
        )
        with pytest.raises(SubmissionBlockedError) as exc_info:
            result.ensure_submittable()
        assert exc_info.value.errors == ["too short", "too low"]
        assert result.exit_code == 1

    def test_merge_keeps_order(self) -> None:
        """Test that merged findings follow this result's own."""
        first = ValidationResult().add_error("overall_length", "a")
        second = ValidationResult().add_error("seat_depth", "b").add_warning(
            "fabric_type", "c"
        )
        merged = first.merge(second)
        assert merged is first
        assert merged.messages == ["a", "b"]
        assert [w.field_name for w in merged.warnings] == ["fabric_type"]

    def test_warnings_for(self) -> None:
        """Test filtering warnings by field."""
        result = (
            ValidationResult()
            .add_warning("wood_type", "w1")
            .add_warning("wood_finish", "f1")
        )
        assert [w.message for w in result.warnings_for("wood_finish")] == ["f1"]
