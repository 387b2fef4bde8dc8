"""Immutable value objects for the booth domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialCategory(str, Enum):
    """Material categories a booth configuration selects from."""

    WOOD = "wood"
    FABRIC = "fabric"
    FINISH = "finish"


@dataclass(frozen=True)
class Template:
    """A booth product family priced per linear foot.

    Attributes:
        id: Unique template identifier (e.g., "straight-wood-back").
        name: Display name.
        description: Short marketing description.
        base_price_rate: Currency per linear foot of overall length.
        icon: Display-only glyph, ignored by pricing and export.
    """

    id: str
    name: str
    description: str
    base_price_rate: float
    icon: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Template id must not be empty")
        if self.base_price_rate <= 0:
            raise ValueError("Template base price rate must be positive")


@dataclass(frozen=True)
class MaterialOption:
    """One selectable choice within a material category."""

    value: str
    label: str
    multiplier: float = 1.0

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Material option value must not be empty")
        if self.multiplier <= 0:
            raise ValueError("Material multiplier must be positive")


@dataclass(frozen=True)
class Customer:
    """Customer contact details, passed through to the parameter file."""

    name: str
    email: str

    @classmethod
    def demo(cls) -> "Customer":
        """Placeholder customer used before sign-in."""
        return cls(name="Demo User", email="demo@example.com")
