"""Pydantic schema for booth order configuration files.

An order configuration file is JSON:

    {
      "schema_version": "1.0",
      "template": "straight-full-upholstered",
      "customer": {"name": "Demo User", "email": "demo@example.com"},
      "booth": {"overall_length": 60, "number_of_segments": 2}
    }

Every booth field is optional and defaults to the standard starting
configuration. Dimension ranges are deliberately not schema constraints:
an out-of-range length still loads and is reported by the validators.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version 1.0: Initial order configuration schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class BoothConfig(BaseModel):
    """Booth dimensions (inches/degrees) and material selections."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    overall_length: float = Field(default=48, ge=0)
    overall_height: float = Field(default=42, ge=0)
    overall_depth: float = Field(default=24, ge=0)
    seat_height: float = Field(default=18, ge=0)
    seat_depth: float = Field(default=18, ge=0)
    back_angle: float = Field(default=15, ge=0)
    toe_kick_height: float = Field(default=4, ge=0)
    toe_kick_depth: float = Field(default=3, ge=0)
    number_of_segments: int = Field(default=1, ge=1)
    cushion_thickness: float = Field(default=3, ge=0)
    wood_type: str = "maple"
    fabric_type: str = "commercial-vinyl"
    wood_finish: str = "natural"


class CustomerConfig(BaseModel):
    """Customer contact details; free-form, not validated."""

    model_config = ConfigDict(extra="forbid")

    name: str = "Demo User"
    email: str = "demo@example.com"


class OrderConfiguration(BaseModel):
    """Root order configuration.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        template: Catalog template id
        customer: Customer contact details
        booth: Booth dimensions and materials
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    template: str = Field(..., min_length=1)
    customer: CustomerConfig = Field(default_factory=CustomerConfig)
    booth: BoothConfig = Field(default_factory=BoothConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        supported = ", ".join(sorted(SUPPORTED_VERSIONS))
        raise ValueError(
            f"Unsupported schema version: {v}. Supported versions: {supported}"
        )
