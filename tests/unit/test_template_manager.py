"""Unit tests for the TemplateManager class."""

import json
from pathlib import Path

import pytest

from booths.application.config import load_config
from booths.application.templates import TemplateManager, TemplateNotFoundError


class TestTemplateManager:
    """Test suite for TemplateManager class."""

    @pytest.fixture
    def manager(self) -> TemplateManager:
        return TemplateManager()

    def test_list_templates(self, manager: TemplateManager) -> None:
        """Test listing ids, names and descriptions in catalog order."""
        templates = manager.list_templates()
        assert [t[0] for t in templates] == [
            "straight-full-upholstered",
            "straight-wood-back",
            "curved-full-upholstered",
        ]
        assert templates[1][1] == "Straight - Wood Back"

    def test_get_template(self, manager: TemplateManager) -> None:
        """Test getting a template by id."""
        assert manager.get_template("curved-full-upholstered").base_price_rate == 185

    def test_get_unknown_template(self, manager: TemplateManager) -> None:
        """Test that an unknown id raises TemplateNotFoundError."""
        with pytest.raises(TemplateNotFoundError) as exc_info:
            manager.get_template("l-shaped")
        assert exc_info.value.name == "l-shaped"
        assert "l-shaped" in str(exc_info.value)

    def test_template_exists(self, manager: TemplateManager) -> None:
        """Test checking whether a template id exists."""
        assert manager.template_exists("straight-wood-back")
        assert not manager.template_exists("l-shaped")

    def test_starter_config(self, manager: TemplateManager) -> None:
        """Test the starter order for a template."""
        config = manager.starter_config("straight-wood-back")
        assert config.schema_version == "1.0"
        assert config.template == "straight-wood-back"
        assert config.booth.overall_length == 48


class TestInitConfig:
    """Tests for writing starter order files."""

    def test_writes_loadable_file(self, tmp_path: Path) -> None:
        """Test that the written starter file loads back."""
        output = tmp_path / "booth.json"
        TemplateManager().init_config("curved-full-upholstered", output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["template"] == "curved-full-upholstered"
        assert load_config(output).booth.wood_type == "maple"

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """Test that an existing file is not replaced by default."""
        output = tmp_path / "booth.json"
        output.write_text("{}", encoding="utf-8")
        with pytest.raises(FileExistsError):
            TemplateManager().init_config("straight-wood-back", output)
        assert output.read_text(encoding="utf-8") == "{}"

    def test_overwrite(self, tmp_path: Path) -> None:
        """Test replacing an existing file on request."""
        output = tmp_path / "booth.json"
        output.write_text("{}", encoding="utf-8")
        TemplateManager().init_config("straight-wood-back", output, overwrite=True)
        assert "straight-wood-back" in output.read_text(encoding="utf-8")

    def test_unknown_template_writes_nothing(self, tmp_path: Path) -> None:
        """Test that an unknown template leaves no file behind."""
        output = tmp_path / "booth.json"
        with pytest.raises(TemplateNotFoundError):
            TemplateManager().init_config("l-shaped", output)
        assert not output.exists()
