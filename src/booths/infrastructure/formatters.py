"""Text formatters for quotes, reviews, and the catalog."""

from __future__ import annotations

from booths.application.dtos import QuoteOutput
from booths.domain.catalog import DEFAULT_CATALOG, Catalog
from booths.domain.entities import BoothConfiguration
from booths.domain.services.rounding import format_fixed, format_number
from booths.domain.value_objects import MaterialCategory

PREVIEW_LINES = 10


def format_currency(amount: int) -> str:
    """Whole-unit currency with thousands separators, e.g. '$1,742'."""
    return f"${amount:,}"


def _inches(value: float) -> str:
    return f'{format_number(value)}"'


def _material_label(
    catalog: Catalog, quote: QuoteOutput, field_name: str, category: MaterialCategory
) -> str:
    value = getattr(quote.config, field_name)
    if quote.validation.warnings_for(field_name):
        # Priced at no adjustment; shown as entered so the reviewer can spot it
        return f"{value} (not in catalog)"
    return catalog.label(category, value) or value


class QuoteSummaryFormatter:
    """Formats the order summary shown beside the configuration form."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def format(self, quote: QuoteOutput) -> str:
        config = quote.config
        template_name = quote.template.name if quote.template else "(none selected)"
        lines = [
            "ORDER SUMMARY",
            "=" * 40,
            f"Template:    {template_name}",
            f"Length:      {_inches(config.overall_length)}",
            f"Linear Feet: {format_fixed(config.linear_feet, 1)} LF",
            f"Wood:        {_material_label(self.catalog, quote, 'wood_type', MaterialCategory.WOOD)}",
            f"Upholstery:  {_material_label(self.catalog, quote, 'fabric_type', MaterialCategory.FABRIC)}",
            "-" * 40,
            f"Estimated Price: {format_currency(quote.rounded_price)}",
        ]

        if quote.errors:
            lines.append("")
            lines.append("Validation Errors:")
            lines.extend(f"  - {error}" for error in quote.errors)
        if quote.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in quote.warnings)

        return "\n".join(lines)


class PriceBreakdownFormatter:
    """Formats the pricing breakdown from the review step."""

    def format(self, quote: QuoteOutput) -> str:
        breakdown = quote.breakdown
        if quote.template is None:
            return "No template selected; price unavailable."

        rate = format_number(quote.template.base_price_rate)
        lf = format_fixed(breakdown.linear_feet, 1)
        adjustment = breakdown.adjustment_percent
        sign = "+" if adjustment >= 0 else ""
        lines = [
            "PRICING BREAKDOWN",
            "=" * 40,
            f"Base ({lf} LF @ ${rate}): {format_currency(breakdown.rounded_base_price)}",
            f"  Wood multiplier:    x{format_number(breakdown.wood_multiplier)}",
            f"  Fabric multiplier:  x{format_number(breakdown.fabric_multiplier)}",
            f"  Finish multiplier:  x{format_number(breakdown.finish_multiplier)}",
            f"  Segment multiplier: x{format_number(breakdown.segment_multiplier)}",
            f"  Height multiplier:  x{format_number(breakdown.height_multiplier)}",
            f"Material adjustments: {sign}{adjustment}%",
            "-" * 40,
            f"Total: {format_currency(breakdown.rounded_total)}",
        ]
        return "\n".join(lines)


class ReviewFormatter:
    """Formats the configuration details and parameter file preview."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def format_details(self, quote: QuoteOutput) -> str:
        config: BoothConfiguration = quote.config
        template_name = quote.template.name if quote.template else "(none selected)"
        lines = [
            "CONFIGURATION DETAILS",
            "=" * 40,
            f"Template:   {template_name}",
            (
                f"Dimensions: {_inches(config.overall_length)} x "
                f"{_inches(config.overall_height)} x {_inches(config.overall_depth)}"
            ),
            f"Seat:       {_inches(config.seat_height)} H x {_inches(config.seat_depth)} D",
            f"Back Angle: {format_number(config.back_angle)} deg",
            f"Segments:   {config.number_of_segments}",
            f"Wood:       {_material_label(self.catalog, quote, 'wood_type', MaterialCategory.WOOD)}",
            f"Finish:     {_material_label(self.catalog, quote, 'wood_finish', MaterialCategory.FINISH)}",
            f"Upholstery: {_material_label(self.catalog, quote, 'fabric_type', MaterialCategory.FABRIC)}",
        ]
        return "\n".join(lines)

    def format_preview(self, content: str, max_lines: int = PREVIEW_LINES) -> str:
        """First lines of a parameter file, marked when truncated."""
        lines = content.split("\n")
        preview = "\n".join(lines[:max_lines])
        if len(lines) > max_lines:
            preview += "\n... (truncated)"
        return preview


class CatalogFormatter:
    """Formats templates and material tables."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def format_templates(self) -> str:
        templates = self.catalog.templates
        width = max((len(t.id) for t in templates), default=0)
        lines = ["BOOTH TEMPLATES", "=" * 60]
        for template in templates:
            rate = format_number(template.base_price_rate)
            lines.append(f"  {template.id:<{width}}  ${rate}/linear ft  {template.name}")
            lines.append(f"  {'':<{width}}  {template.description}")
        return "\n".join(lines)

    def format_materials(self, category: MaterialCategory | None = None) -> str:
        categories = [category] if category is not None else list(MaterialCategory)
        lines: list[str] = []
        for cat in categories:
            options = self.catalog.options(cat)
            width = max((len(o.value) for o in options), default=0)
            if lines:
                lines.append("")
            lines.append(f"{cat.value.upper()} OPTIONS")
            lines.append("-" * 40)
            for option in options:
                lines.append(
                    f"  {option.value:<{width}}  x{format_number(option.multiplier)}  {option.label}"
                )
        return "\n".join(lines)
