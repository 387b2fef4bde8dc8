"""Unit tests for loading order configuration files."""

import json
from pathlib import Path

import pytest

from booths.application.config import (
    ConfigError,
    LoadedOrder,
    config_to_booth,
    config_to_customer,
    config_to_template,
    load_config,
    load_config_from_dict,
    load_order,
    load_order_from_dict,
)
from booths.application.templates import TemplateManager, TemplateNotFoundError
from booths.domain.catalog import Catalog
from booths.domain.entities import BoothConfiguration
from booths.domain.value_objects import Customer, Template


class TestLoadConfig:
    """Tests for load_config error categories."""

    def test_valid_file(self, fixtures_path: Path) -> None:
        """Test loading a complete order file."""
        config = load_config(fixtures_path / "valid_full.json")
        assert config.template == "straight-full-upholstered"
        assert config.booth.number_of_segments == 3
        assert config.customer.name == "Jane Smith"

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Test that a missing file is reported as file_not_found."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        """Test that a directory in place of a file is a read error."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type in ("file_read_error", "permission_denied")

    def test_invalid_json_reports_position(self, fixtures_path: Path) -> None:
        """Test that a JSON syntax error carries its line and column."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 6
        assert "line 6" in str(error)

    def test_schema_error_reports_path(self, fixtures_path: Path) -> None:
        """Test that an unknown booth field is reported by its dotted path."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "booth.armrest_style"
        assert "booth.armrest_style" in error.message

    def test_out_of_range_loads(self, fixtures_path: Path) -> None:
        """Test that out-of-range dimensions are left to the validators."""
        config = load_config(fixtures_path / "invalid_dimensions.json")
        assert config.booth.overall_length == 20


class TestLoadConfigFromDict:
    """Tests for schema-checking request bodies."""

    def test_valid(self) -> None:
        """Test that a minimal order passes the schema."""
        config = load_config_from_dict({"schema_version": "1.0", "template": "x"})
        assert config.template == "x"

    def test_missing_field_has_no_value(self) -> None:
        """Test that a missing field is reported without the enclosing object."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"template": "x"})
        detail = exc_info.value.details[0]
        assert detail["path"] == "schema_version"
        assert detail["value"] is None
        assert exc_info.value.path is None

    def test_wrong_type_keeps_value(self) -> None:
        """Test that a rejected value is kept in the details."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"schema_version": "1.0", "template": "x", "booth": {"seat_height": "tall"}}
            )
        detail = exc_info.value.details[0]
        assert detail["path"] == "booth.seat_height"
        assert detail["value"] == "tall"
        assert "(got: 'tall')" in exc_info.value.message


class TestLoadOrder:
    """Tests for resolving orders into domain objects."""

    def test_load_order(self, fixtures_path: Path) -> None:
        """Test that an order file yields template, customer and booth."""
        order = load_order(fixtures_path / "valid_full.json")

        assert isinstance(order, LoadedOrder)
        assert isinstance(order.template, Template)
        assert order.template.id == "straight-full-upholstered"
        assert order.customer == Customer("Jane Smith", "jane@example.com")
        assert order.config.number_of_segments == 3
        assert order.config.wood_type == "walnut"
        assert order.source.template == "straight-full-upholstered"

    def test_load_order_unknown_template(self, fixtures_path: Path) -> None:
        """Test that an unknown template raises TemplateNotFoundError."""
        with pytest.raises(TemplateNotFoundError):
            load_order(fixtures_path / "unknown_template.json")

    def test_load_order_file_error_first(self, tmp_path: Path) -> None:
        """Test that file errors surface before template lookup."""
        with pytest.raises(ConfigError):
            load_order(tmp_path / "missing.json")

    def test_load_order_from_dict_uses_manager(self) -> None:
        """Test that templates are looked up in the given manager."""
        manager = TemplateManager(Catalog(templates=()))
        with pytest.raises(TemplateNotFoundError):
            load_order_from_dict(
                {"schema_version": "1.0", "template": "straight-wood-back"}, manager
            )

    def test_load_order_from_dict_defaults(self) -> None:
        """Test that omitted sections take their defaults."""
        order = load_order_from_dict(
            {"schema_version": "1.0", "template": "curved-full-upholstered"}
        )
        assert order.template.base_price_rate == 185
        assert order.config == BoothConfiguration()
        assert order.customer == Customer.demo()


class TestAdapters:
    """Tests for schema -> domain conversion."""

    def test_config_to_booth(self, fixtures_path: Path) -> None:
        """Test building the booth configuration."""
        booth = config_to_booth(load_config(fixtures_path / "valid_full.json"))
        assert isinstance(booth, BoothConfiguration)
        assert booth.wood_type == "walnut"
        assert booth.overall_height == 50

    def test_defaults_match_domain_defaults(self) -> None:
        """Test that schema defaults equal BoothConfiguration defaults."""
        config = load_config_from_dict({"schema_version": "1.0", "template": "x"})
        assert config_to_booth(config) == BoothConfiguration()
        assert config_to_booth(config.booth) == BoothConfiguration()

    def test_config_to_customer(self, fixtures_path: Path) -> None:
        """Test building the customer."""
        customer = config_to_customer(load_config(fixtures_path / "valid_full.json"))
        assert customer.email == "jane@example.com"

    def test_config_to_template(self, fixtures_path: Path) -> None:
        """Test resolving the template with the default manager."""
        template = config_to_template(load_config(fixtures_path / "valid_full.json"))
        assert template.base_price_rate == 145

    def test_written_starter_round_trips(self, tmp_path: Path) -> None:
        """Test that a minimal file written to disk loads as defaults."""
        path = tmp_path / "order.json"
        path.write_text(
            json.dumps({"schema_version": "1.0", "template": "straight-wood-back"}),
            encoding="utf-8",
        )
        assert config_to_booth(load_config(path)) == BoothConfiguration()
