"""Domain entities for booth configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any

INCHES_PER_FOOT = 12

# Numeric fields in parameter-file order. number_of_segments is numeric too
# but carries its own integer rule.
DIMENSION_FIELDS: tuple[str, ...] = (
    "overall_length",
    "overall_height",
    "overall_depth",
    "seat_height",
    "seat_depth",
    "back_angle",
    "toe_kick_height",
    "toe_kick_depth",
)

MATERIAL_FIELDS: tuple[str, ...] = ("wood_type", "fabric_type", "wood_finish")


def _check_field(name: str, value: Any) -> None:
    """Raise ValueError if value breaks the invariant for field name."""
    if name == "number_of_segments":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")
    elif name in MATERIAL_FIELDS:
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string, got {value!r}")
    else:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass
class BoothConfiguration:
    """Mutable booth configuration under edit.

    Lengths are in inches and back_angle is in degrees. The material fields
    hold option values from the catalog; they are not resolved here, so an
    unknown value is accepted and simply prices with a 1.0 multiplier.

    The UI edits one field at a time through update(); a restart replaces
    the instance with a fresh BoothConfiguration().

    Attributes:
        overall_length: Total booth length in inches.
        overall_height: Total height including back, in inches.
        overall_depth: Front-to-back depth in inches.
        seat_height: Finished seat height in inches.
        seat_depth: Seat depth in inches.
        back_angle: Back recline in degrees.
        toe_kick_height: Toe kick height in inches.
        toe_kick_depth: Toe kick recess depth in inches.
        number_of_segments: Modular segment count (at least 1).
        cushion_thickness: Seat cushion thickness in inches.
        wood_type: Wood option value.
        fabric_type: Upholstery option value.
        wood_finish: Finish option value.
    """

    overall_length: float = 48
    overall_height: float = 42
    overall_depth: float = 24
    seat_height: float = 18
    seat_depth: float = 18
    back_angle: float = 15
    toe_kick_height: float = 4
    toe_kick_depth: float = 3
    number_of_segments: int = 1
    cushion_thickness: float = 3
    wood_type: str = "maple"
    fabric_type: str = "commercial-vinyl"
    wood_finish: str = "natural"

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_field(f.name, getattr(self, f.name))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """All configuration field names in declaration order."""
        return tuple(f.name for f in fields(cls))

    @property
    def linear_feet(self) -> float:
        """Overall length in linear feet (unrounded)."""
        return self.overall_length / INCHES_PER_FOOT

    def update(self, **changes: Any) -> "BoothConfiguration":
        """Apply field edits in place and return self for chaining.

        Every change is checked before any field is written, so a rejected
        edit leaves the configuration untouched.

        Raises:
            ValueError: If a field name is unknown or a value breaks the
                field's invariant.
        """
        known = set(self.field_names())
        for name, value in changes.items():
            if name not in known:
                raise ValueError(f"Unknown booth configuration field: {name}")
            _check_field(name, value)
        for name, value in changes.items():
            setattr(self, name, value)
        return self

    def snapshot(self) -> "BoothConfiguration":
        """Independent copy of the current state."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Field values keyed by field name."""
        return {name: getattr(self, name) for name in self.field_names()}
