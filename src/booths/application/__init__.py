"""Application layer - use cases and orchestration."""

from .commands import ExportParametersCommand, QuoteBoothCommand, SubmissionBlockedError
from .dtos import ParameterExport, QuoteOutput
from .session import BoothSession, WizardStep, WizardStepError

__all__ = [
    "BoothSession",
    "ExportParametersCommand",
    "ParameterExport",
    "QuoteBoothCommand",
    "QuoteOutput",
    "SubmissionBlockedError",
    "WizardStep",
    "WizardStepError",
]
