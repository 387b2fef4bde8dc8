"""Application commands (use cases) for quoting and exporting booths."""

from __future__ import annotations

import logging
from datetime import datetime

from booths.application.config.validators import (
    SubmissionBlockedError,
    ValidationResult,
    validate_booth,
)
from booths.domain.catalog import DEFAULT_CATALOG, Catalog
from booths.domain.entities import BoothConfiguration
from booths.domain.services.parameter_file import (
    build_parameter_record,
    parameter_filename,
    render_parameter_file,
)
from booths.domain.services.pricing import PricingEngine
from booths.domain.value_objects import Customer, Template

from .dtos import ParameterExport, QuoteOutput

logger = logging.getLogger(__name__)


class QuoteBoothCommand:
    """Validate and price a configuration snapshot."""

    def __init__(
        self,
        pricing_engine: PricingEngine | None = None,
        catalog: Catalog | None = None,
    ) -> None:
        self.catalog = catalog or DEFAULT_CATALOG
        self.pricing_engine = pricing_engine or PricingEngine(self.catalog)

    def _validate(self, config: BoothConfiguration) -> ValidationResult:
        if self.catalog is DEFAULT_CATALOG:
            return validate_booth(config)
        return validate_booth(config, self.catalog)

    def execute(
        self, template: Template | None, config: BoothConfiguration
    ) -> QuoteOutput:
        """Quote a configuration.

        Args:
            template: Selected template, or None before selection (prices at 0).
            config: Configuration to quote. A snapshot is taken so later
                edits do not change the returned output.

        Returns:
            QuoteOutput with validation findings and the price breakdown.
        """
        snapshot = config.snapshot()
        return QuoteOutput(
            template=template,
            config=snapshot,
            breakdown=self.pricing_engine.breakdown(template, snapshot),
            validation=self._validate(snapshot),
        )


class ExportParametersCommand:
    """Turn a valid configuration into a parameter file export."""

    def __init__(self, quote_command: QuoteBoothCommand | None = None) -> None:
        self.quote_command = quote_command or QuoteBoothCommand()

    def execute(
        self,
        template: Template | None,
        customer: Customer,
        config: BoothConfiguration,
        timestamp: datetime,
    ) -> ParameterExport:
        """Build the parameter file for a submission.

        Raises:
            SubmissionBlockedError: If no template is selected or the
                configuration has validation errors.
        """
        if template is None:
            raise SubmissionBlockedError(["No booth template selected"])

        quote = self.quote_command.execute(template, config)
        quote.validation.ensure_submittable()

        record = build_parameter_record(
            template, customer, quote.config, quote.estimated_price, timestamp
        )
        export = ParameterExport(
            template=template,
            customer=customer,
            config=quote.config,
            estimated_price=quote.estimated_price,
            timestamp=timestamp,
            record=record,
            content=render_parameter_file(record, timestamp),
            filename=parameter_filename(timestamp),
        )
        logger.info(
            f"Prepared parameter file {export.filename} for '{template.id}' "
            f"(estimated {record['estimated_price']})"
        )
        return export
