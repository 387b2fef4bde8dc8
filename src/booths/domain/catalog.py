"""Static product catalog: booth templates and material option tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .value_objects import MaterialCategory, MaterialOption, Template

# Multiplier applied when a material value does not resolve in its category.
FALLBACK_MULTIPLIER = 1.0

TEMPLATES: tuple[Template, ...] = (
    Template(
        id="straight-full-upholstered",
        name="Straight - Fully Upholstered",
        description="Classic straight booth with upholstered seat and back",
        base_price_rate=145,
        icon="🪑",
    ),
    Template(
        id="straight-wood-back",
        name="Straight - Wood Back",
        description="Straight booth with wood back panel and upholstered seat",
        base_price_rate=165,
        icon="🏛️",
    ),
    Template(
        id="curved-full-upholstered",
        name="Curved - Fully Upholstered",
        description="Curved booth with upholstered seat and back",
        base_price_rate=185,
        icon="🌙",
    ),
)

MATERIAL_OPTIONS: dict[MaterialCategory, tuple[MaterialOption, ...]] = {
    MaterialCategory.WOOD: (
        MaterialOption("maple", "Maple", 1.0),
        MaterialOption("red-oak", "Red Oak", 1.1),
        MaterialOption("walnut", "Walnut", 1.4),
        MaterialOption("spec-to-follow", "See Spec to Follow", 1.0),
    ),
    MaterialCategory.FABRIC: (
        MaterialOption("commercial-vinyl", "Commercial Vinyl", 1.0),
        MaterialOption("fabric-grade-3", "Fabric Grade 3", 1.2),
        MaterialOption("fabric-grade-5", "Fabric Grade 5", 1.5),
        MaterialOption("spec-to-follow", "See Spec to Follow", 1.0),
    ),
    MaterialCategory.FINISH: (
        MaterialOption("natural", "Natural/Clear", 1.0),
        MaterialOption("stain", "Stain", 1.05),
        MaterialOption("paint", "Paint", 1.1),
    ),
}


@dataclass(frozen=True)
class Catalog:
    """Lookup tables for templates and material options.

    The catalog is pure reference data. Lookups never raise for unknown
    keys; callers decide whether a missing entry is an error.

    Example:
        >>> DEFAULT_CATALOG.multiplier(MaterialCategory.WOOD, "walnut")
        1.4
        >>> DEFAULT_CATALOG.multiplier(MaterialCategory.WOOD, "teak")
        1.0
    """

    templates: tuple[Template, ...] = TEMPLATES
    materials: Mapping[MaterialCategory, tuple[MaterialOption, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(MATERIAL_OPTIONS))
    )

    def __post_init__(self) -> None:
        ids = [template.id for template in self.templates]
        if len(ids) != len(set(ids)):
            raise ValueError("Template ids must be unique")
        for category, options in self.materials.items():
            values = [option.value for option in options]
            if len(values) != len(set(values)):
                raise ValueError(
                    f"Material values must be unique within category '{category.value}'"
                )

    def get_template(self, template_id: str) -> Template | None:
        """Return the template with the given id, or None."""
        for template in self.templates:
            if template.id == template_id:
                return template
        return None

    def template_ids(self) -> list[str]:
        """Template ids in catalog order."""
        return [template.id for template in self.templates]

    def options(self, category: MaterialCategory | str) -> tuple[MaterialOption, ...]:
        """Options for a category in display order (empty if unknown)."""
        try:
            key = MaterialCategory(category)
        except ValueError:
            return ()
        return self.materials.get(key, ())

    def find_material(
        self, category: MaterialCategory | str, value: str
    ) -> MaterialOption | None:
        """Resolve a material value within its category."""
        for option in self.options(category):
            if option.value == value:
                return option
        return None

    def multiplier(self, category: MaterialCategory | str, value: str) -> float:
        """Price multiplier for a material, FALLBACK_MULTIPLIER if unresolved."""
        option = self.find_material(category, value)
        if option is None:
            return FALLBACK_MULTIPLIER
        return option.multiplier

    def label(self, category: MaterialCategory | str, value: str) -> str | None:
        """Display label for a material, or None if unresolved."""
        option = self.find_material(category, value)
        return option.label if option is not None else None


DEFAULT_CATALOG = Catalog()
