"""Unit tests for the service factory."""

from booths.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from booths.domain.catalog import Catalog
from booths.domain.entities import BoothConfiguration
from booths.domain.value_objects import Template


class TestServiceFactory:
    """Tests for ServiceFactory and the global factory."""

    def test_default_factory_is_cached(self) -> None:
        """Test that get_factory returns one shared instance."""
        assert get_factory() is get_factory()

    def test_set_and_reset(self) -> None:
        """Test replacing and resetting the global factory."""
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom

    def test_pricing_engine_is_shared(self) -> None:
        """Test that commands share the cached pricing engine."""
        factory = ServiceFactory()
        assert factory.get_pricing_engine() is factory.get_pricing_engine()
        assert factory.create_quote_command().pricing_engine is factory.get_pricing_engine()

    def test_custom_catalog_flows_through(self) -> None:
        """Test that a custom catalog reaches the created commands."""
        template = Template("bench", "Bench", "Simple bench", 100)
        factory = ServiceFactory(catalog=Catalog(templates=(template,)))

        assert factory.get_template_manager().get_template("bench") is template
        quote = factory.create_quote_command().execute(template, BoothConfiguration())
        assert quote.estimated_price == 400.0

    def test_session_uses_factory_catalog(self) -> None:
        """Test that sessions look templates up in the factory catalog."""
        template = Template("bench", "Bench", "Simple bench", 100)
        factory = ServiceFactory(catalog=Catalog(templates=(template,)))
        session = factory.create_session()
        assert session.select_template("bench") is template
