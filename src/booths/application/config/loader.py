"""Reading booth orders.

An order names a template, the customer, and the booth settings. The loader
turns a JSON order file (or the equivalent request body) into the template,
customer and BoothConfiguration that the quote and export commands take.

Every way reading can fail is a ConfigError whose error_type the CLI and the
API both switch on. An unknown template is reported separately, as
TemplateNotFoundError, because the API answers it with 404.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from booths.application.config.adapter import (
    config_to_booth,
    config_to_customer,
    config_to_template,
)
from booths.application.config.schema import OrderConfiguration
from booths.domain.entities import BoothConfiguration
from booths.domain.value_objects import Customer, Template

if TYPE_CHECKING:
    from booths.application.templates.manager import TemplateManager

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """An order that could not be read.

    Attributes:
        message: Summary suitable for display.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: The order file, when reading from disk.
        details: json_parse gives line/column/message; validation gives one
            path/message/value/error_type entry per rejected field.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class LoadedOrder:
    """An order resolved against the template catalog."""

    source: OrderConfiguration
    template: Template
    customer: Customer
    config: BoothConfiguration


def _rejected_fields(
    error: PydanticValidationError, path: Path | None
) -> ConfigError:
    details: list[dict[str, Any]] = []
    lines = ["Configuration validation failed:"]
    for err in error.errors():
        # Orders hold no lists, so a location is a plain run of field names
        where = ".".join(str(part) for part in err["loc"]) or "(root)"
        # A missing field's input is the whole enclosing section
        value = None if err["type"] == "missing" else err.get("input")
        details.append(
            {
                "path": where,
                "message": err["msg"],
                "value": value,
                "error_type": err["type"],
            }
        )
        shown = f" (got: {value!r})" if value is not None else ""
        lines.append(f"  - {where}: {err['msg']}{shown}")
    return ConfigError(
        "\n".join(lines), error_type="validation", path=path, details=details
    )


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        )
    except OSError as e:
        raise ConfigError(f"Error reading config file: {path}: {e}", "file_read_error", path)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _parse(data: Any, path: Path | None = None) -> OrderConfiguration:
    try:
        return OrderConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _rejected_fields(e, path)


def load_config(path: Path) -> OrderConfiguration:
    """Read and schema-check an order file.

    Out-of-range dimensions and unknown materials load fine; those are
    findings for the validators, not reasons to reject the file.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or does not
            match the order schema.
    """
    return _parse(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> OrderConfiguration:
    """Schema-check an order given as parsed JSON.

    Raises:
        ConfigError: With error_type "validation".
    """
    return _parse(data)


def resolve_order(
    order: OrderConfiguration, manager: TemplateManager | None = None
) -> LoadedOrder:
    """Look up the order's template and build its domain objects.

    Raises:
        TemplateNotFoundError: If the catalog has no such template.
    """
    loaded = LoadedOrder(
        source=order,
        template=config_to_template(order, manager),
        customer=config_to_customer(order),
        config=config_to_booth(order),
    )
    logger.debug(
        f"Loaded order for '{loaded.template.id}' "
        f"({loaded.config.overall_length} in, {loaded.config.number_of_segments} segments)"
    )
    return loaded


def load_order(path: Path, manager: TemplateManager | None = None) -> LoadedOrder:
    """Read an order file and resolve it.

    Example:
        >>> order = load_order(Path("lobby-booth.json"))
        >>> order.template.id
        'straight-full-upholstered'

    Raises:
        ConfigError: If the file cannot be loaded.
        TemplateNotFoundError: If it names an unknown template.
    """
    return resolve_order(load_config(path), manager)


def load_order_from_dict(
    data: dict[str, Any], manager: TemplateManager | None = None
) -> LoadedOrder:
    """Resolve an order given as a request body.

    Raises:
        ConfigError: If the data does not match the order schema.
        TemplateNotFoundError: If it names an unknown template.
    """
    return resolve_order(load_config_from_dict(data), manager)
