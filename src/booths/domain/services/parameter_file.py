"""Parameter file: the key=value record handed to fabrication.

Layout of a parameter file::

    # Custom Booth Configuration
    # Generated: 3/5/2025, 9:07:02 AM

    template_id=straight-full-upholstered
    ...
    linear_feet=4.00

Key order is part of the format; shop intake tooling may read fields by
line position. Values are written verbatim with no quoting or escaping.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import datetime, timezone

from ..entities import INCHES_PER_FOOT, BoothConfiguration
from ..value_objects import Customer, Template
from .rounding import format_fixed, format_number, round_half_away_from_zero

TITLE_COMMENT = "# Custom Booth Configuration"
GENERATED_PREFIX = "# Generated: "
COMMENT_PREFIX = "#"

PARAMETER_KEYS: tuple[str, ...] = (
    "template_id",
    "template_name",
    "customer_name",
    "customer_email",
    "order_date",
    "overall_length",
    "overall_height",
    "overall_depth",
    "seat_height",
    "seat_depth",
    "back_angle",
    "toe_kick_height",
    "toe_kick_depth",
    "number_of_segments",
    "cushion_thickness",
    "wood_type",
    "fabric_type",
    "wood_finish",
    "estimated_price",
    "linear_feet",
)

# Configuration fields copied into the record under the same name.
CONFIG_KEYS: tuple[str, ...] = PARAMETER_KEYS[5:18]


class ParameterFileError(ValueError):
    """Raised when parameter file text cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class ParameterRecord(Mapping[str, str]):
    """Immutable, ordered key/value record for one submission."""

    def __init__(self, items: list[tuple[str, str]]) -> None:
        data: dict[str, str] = {}
        for key, value in items:
            if key in data:
                raise ValueError(f"Duplicate parameter key: {key}")
            data[key] = value
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ParameterRecord({list(self._data.items())!r})"

    def lines(self) -> list[str]:
        """Body lines as key=value strings."""
        return [f"{key}={value}" for key, value in self._data.items()]


def format_generated_timestamp(timestamp: datetime) -> str:
    """Locale-style date/time, e.g. '3/5/2025, 9:07:02 AM'."""
    hour = timestamp.hour % 12 or 12
    meridiem = "AM" if timestamp.hour < 12 else "PM"
    return (
        f"{timestamp.month}/{timestamp.day}/{timestamp.year}, "
        f"{hour}:{timestamp.minute:02d}:{timestamp.second:02d} {meridiem}"
    )


def order_date(timestamp: datetime) -> str:
    """ISO calendar date of the order (UTC for aware timestamps)."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.date().isoformat()


def parameter_filename(timestamp: datetime) -> str:
    """Download name for a parameter file: booth_config_<epoch ms>.txt."""
    # Whole seconds first so float error cannot shift the millisecond digit
    seconds = int(timestamp.replace(microsecond=0).timestamp())
    millis = seconds * 1000 + timestamp.microsecond // 1000
    return f"booth_config_{millis}.txt"


def _render(value: object) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)  # type: ignore[arg-type]


def build_parameter_record(
    template: Template,
    customer: Customer,
    config: BoothConfiguration,
    computed_price: float,
    timestamp: datetime,
) -> ParameterRecord:
    """Assemble the ordered record for a submission."""
    items: list[tuple[str, str]] = [
        ("template_id", template.id),
        ("template_name", template.name),
        ("customer_name", customer.name),
        ("customer_email", customer.email),
        ("order_date", order_date(timestamp)),
    ]
    items.extend((key, _render(getattr(config, key))) for key in CONFIG_KEYS)
    items.append(("estimated_price", str(round_half_away_from_zero(computed_price))))
    items.append(
        ("linear_feet", format_fixed(config.overall_length / INCHES_PER_FOOT, 2))
    )
    return ParameterRecord(items)


def render_parameter_file(record: ParameterRecord, timestamp: datetime) -> str:
    """Render a record with its header comments."""
    header = [
        TITLE_COMMENT,
        GENERATED_PREFIX + format_generated_timestamp(timestamp),
        "",
    ]
    return "\n".join(header + record.lines()) + "\n"


def serialize_parameters(
    template: Template,
    customer: Customer,
    config: BoothConfiguration,
    computed_price: float,
    timestamp: datetime,
) -> str:
    """Produce the parameter file text for a submission.

    Pure: identical inputs, timestamp included, give identical text.

    Args:
        template: Selected booth template.
        customer: Customer contact details (written unchanged).
        config: Final booth configuration.
        computed_price: Unrounded estimate; written rounded half away from zero.
        timestamp: Generation time, used for the header and order_date.

    Returns:
        Newline-terminated parameter file content.
    """
    record = build_parameter_record(
        template, customer, config, computed_price, timestamp
    )
    return render_parameter_file(record, timestamp)


def parse_parameter_file(text: str) -> dict[str, str]:
    """Parse the key=value body of a parameter file.

    Comment lines and blank lines are skipped. Each remaining line is split
    on its first '=' so values may themselves contain '='.

    Raises:
        ParameterFileError: On a line without '=', an empty key, or a
            repeated key.
    """
    values: dict[str, str] = {}
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ParameterFileError(f"Expected key=value, got {line!r}", line_number)
        if not key:
            raise ParameterFileError("Empty parameter key", line_number)
        if key in values:
            raise ParameterFileError(f"Duplicate parameter key: {key}", line_number)
        values[key] = value
    return values
