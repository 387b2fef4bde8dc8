"""Material reference validator.

Pricing treats a material value missing from its catalog category as a 1.0
multiplier so an estimate is always available. That fallback can hide a
typo or a catalog that fell out of sync, so this validator surfaces each
unresolved value as a warning. Warnings do not block submission.
"""

from __future__ import annotations

import logging

from booths.domain.catalog import DEFAULT_CATALOG, Catalog
from booths.domain.entities import BoothConfiguration
from booths.domain.value_objects import MaterialCategory

from .base import ValidationResult

logger = logging.getLogger(__name__)

# Configuration field -> catalog category it references.
MATERIAL_FIELD_CATEGORIES: dict[str, MaterialCategory] = {
    "wood_type": MaterialCategory.WOOD,
    "fabric_type": MaterialCategory.FABRIC,
    "wood_finish": MaterialCategory.FINISH,
}


class MaterialReferenceValidator:
    """Warns about material values the catalog cannot resolve."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    @property
    def name(self) -> str:
        return "materials"

    def validate(self, config: BoothConfiguration) -> ValidationResult:
        result = ValidationResult()
        for field_name, category in MATERIAL_FIELD_CATEGORIES.items():
            value = getattr(config, field_name)
            if self.catalog.find_material(category, value) is not None:
                continue
            logger.warning(
                f"Unresolved {category.value} option '{value}'; pricing with 1.0 multiplier"
            )
            options = ", ".join(o.value for o in self.catalog.options(category))
            result.add_warning(
                field_name,
                f"Unknown {category.value} option '{value}' is priced at no adjustment",
                value=value,
                suggestion=f"Choose one of: {options}",
            )
        return result
