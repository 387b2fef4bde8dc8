"""Wizard session: the state a booth-builder front end holds.

The session owns the selected template, the customer, the configuration
under edit, and the current wizard step. It never prices or validates on
its own; every refresh goes through QuoteBoothCommand against the latest
configuration snapshot.

Steps run template -> configure -> review. Leaving "template" needs a
selected template; leaving "configure" needs a configuration with no
validation errors. Going back is always allowed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from booths.application.commands import ExportParametersCommand, QuoteBoothCommand
from booths.application.dtos import ParameterExport, QuoteOutput
from booths.application.templates.manager import TemplateManager
from booths.domain.entities import BoothConfiguration
from booths.domain.value_objects import Customer, Template

logger = logging.getLogger(__name__)


class WizardStep(str, Enum):
    """Wizard steps in order."""

    TEMPLATE = "template"
    CONFIGURE = "configure"
    REVIEW = "review"


STEP_ORDER: tuple[WizardStep, ...] = (
    WizardStep.TEMPLATE,
    WizardStep.CONFIGURE,
    WizardStep.REVIEW,
)


class WizardStepError(Exception):
    """Raised on a step transition the wizard does not allow."""

    def __init__(self, step: WizardStep, reasons: list[str]) -> None:
        self.step = step
        self.reasons = reasons
        super().__init__(f"Cannot leave step '{step.value}': {'; '.join(reasons)}")


class BoothSession:
    """Single-user wizard state for configuring one booth."""

    def __init__(
        self,
        customer: Customer | None = None,
        template_manager: TemplateManager | None = None,
        quote_command: QuoteBoothCommand | None = None,
        export_command: ExportParametersCommand | None = None,
    ) -> None:
        self.customer = customer or Customer.demo()
        self.template_manager = template_manager or TemplateManager()
        self.quote_command = quote_command or QuoteBoothCommand()
        self.export_command = export_command or ExportParametersCommand(
            self.quote_command
        )
        self.template: Template | None = None
        self.config = BoothConfiguration()
        self.step = WizardStep.TEMPLATE

    def select_template(self, template_id: str) -> Template:
        """Select a template by id.

        Raises:
            TemplateNotFoundError: If the id is not in the catalog.
        """
        self.template = self.template_manager.get_template(template_id)
        logger.debug(f"Selected template '{template_id}'")
        return self.template

    def edit(self, **changes: Any) -> QuoteOutput:
        """Apply field edits and return the refreshed quote.

        Raises:
            ValueError: If an edit breaks a field invariant; nothing changes.
        """
        self.config.update(**changes)
        return self.refresh()

    def refresh(self) -> QuoteOutput:
        """Validate and price the current configuration."""
        return self.quote_command.execute(self.template, self.config)

    def blocking_reasons(self) -> list[str]:
        """Why the current step cannot advance (empty if it can)."""
        if self.step is WizardStep.TEMPLATE:
            return [] if self.template is not None else ["No booth template selected"]
        if self.step is WizardStep.CONFIGURE:
            return self.refresh().errors
        return ["Review is the last step"]

    @property
    def can_advance(self) -> bool:
        return not self.blocking_reasons()

    def advance(self) -> WizardStep:
        """Move to the next step.

        Raises:
            WizardStepError: If the current step's requirements are not met.
        """
        reasons = self.blocking_reasons()
        if reasons:
            raise WizardStepError(self.step, reasons)
        self.step = STEP_ORDER[STEP_ORDER.index(self.step) + 1]
        return self.step

    def back(self) -> WizardStep:
        """Return to the previous step; stays put on the first step."""
        index = STEP_ORDER.index(self.step)
        if index > 0:
            self.step = STEP_ORDER[index - 1]
        return self.step

    def restart(self) -> None:
        """Discard the configuration and template selection."""
        self.template = None
        self.config = BoothConfiguration()
        self.step = WizardStep.TEMPLATE

    def submit(self, timestamp: datetime | None = None) -> ParameterExport:
        """Produce the parameter file for the reviewed configuration.

        Raises:
            WizardStepError: If the session is not on the review step.
            SubmissionBlockedError: If the configuration cannot be submitted.
        """
        if self.step is not WizardStep.REVIEW:
            raise WizardStepError(self.step, ["Submit is only available on review"])
        return self.export_command.execute(
            self.template, self.customer, self.config, timestamp or datetime.now()
        )
