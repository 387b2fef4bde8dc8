"""Findings produced when a booth configuration is checked.

Every finding names the BoothConfiguration field it concerns so a form can
show it beside that input. Errors are the submit gate: a result holding
any error cannot be turned into a parameter file. Warnings, such as a
material the catalog cannot price, are shown but never block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Path reported for findings that concern no single field, such as a
# validator that crashed.
GENERAL_PATH = "validation"


def field_path(field_name: str | None) -> str:
    """Dotted location of a field inside an order file, e.g. 'booth.seat_height'."""
    return f"booth.{field_name}" if field_name else GENERAL_PATH


class SubmissionBlockedError(Exception):
    """Raised when an order cannot be submitted.

    Attributes:
        errors: The reasons submission was refused.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Submission blocked: {'; '.join(errors)}")


@dataclass(frozen=True)
class ValidationError:
    """A finding that blocks submission."""

    field_name: str | None
    message: str
    value: Any = None

    @property
    def path(self) -> str:
        return field_path(self.field_name)


@dataclass(frozen=True)
class ValidationWarning:
    """A finding shown to the user that does not block submission.

    Attributes:
        field_name: Configuration field concerned, or None.
        message: What looks wrong.
        value: The value as entered.
        suggestion: How to resolve it, if there is an obvious fix.
    """

    field_name: str | None
    message: str
    value: Any = None
    suggestion: str | None = None

    @property
    def path(self) -> str:
        return field_path(self.field_name)


@dataclass
class ValidationResult:
    """Errors and warnings for one configuration snapshot."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when nothing blocks submission."""
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def messages(self) -> list[str]:
        """Error messages in the order they were found."""
        return [error.message for error in self.errors]

    @property
    def warning_messages(self) -> list[str]:
        return [warning.message for warning in self.warnings]

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors, 2 with only warnings, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def warnings_for(self, field_name: str) -> list[ValidationWarning]:
        """Warnings attached to one configuration field."""
        return [w for w in self.warnings if w.field_name == field_name]

    def ensure_submittable(self) -> None:
        """Refuse submission while any error remains.

        Raises:
            SubmissionBlockedError: Listing every error message.
        """
        if self.errors:
            raise SubmissionBlockedError(self.messages)

    def add_error(
        self, field_name: str | None, message: str, value: Any = None
    ) -> ValidationResult:
        self.errors.append(ValidationError(field_name, message, value))
        return self

    def add_warning(
        self,
        field_name: str | None,
        message: str,
        value: Any = None,
        suggestion: str | None = None,
    ) -> ValidationResult:
        self.warnings.append(ValidationWarning(field_name, message, value, suggestion))
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append another result's findings after this one's."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self
