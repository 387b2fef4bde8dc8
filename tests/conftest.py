"""Pytest configuration and shared fixtures for booth tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from booths.application.config.validators import ValidatorRegistry
from booths.application.factory import reset_factory
from booths.domain.catalog import DEFAULT_CATALOG
from booths.domain.value_objects import Customer, Template

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")


@pytest.fixture(autouse=True)
def _reset_services():
    """Give every test the default factory and validator set."""
    reset_factory()
    ValidatorRegistry.reset_defaults()
    yield
    reset_factory()
    ValidatorRegistry.reset_defaults()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory of sample order configuration files."""
    return FIXTURES_PATH


@pytest.fixture
def straight_template() -> Template:
    """The straight fully upholstered template ($145/LF)."""
    template = DEFAULT_CATALOG.get_template("straight-full-upholstered")
    assert template is not None
    return template


@pytest.fixture
def customer() -> Customer:
    """The customer on the full sample order."""
    return Customer(name="Jane Smith", email="jane@example.com")


@pytest.fixture
def timestamp() -> datetime:
    """A fixed naive local submission time: 2025-03-05 09:07:02."""
    return datetime(2025, 3, 5, 9, 7, 2)
