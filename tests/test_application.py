"""
==============================================================================
Application Lifecycle Tests
==============================================================================

Tests for startup, sample data, shutdown and the fatal startup path.

==============================================================================
"""

import pytest

from product_catalog.config.settings import Settings
from product_catalog.core.exceptions import AppException
from product_catalog.db import DatabaseInitializer, DatabaseManager
from product_catalog.main import Application
from product_catalog.schemas.product import ProductForm
from product_catalog.services.add_product_flow import FlowState


@pytest.fixture
def file_settings(tmp_path) -> Settings:
    """Settings for a SQLite file inside a temporary directory."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path}/db/catalog.db",
    )


class TestLifecycle:
    """Tests for start and shutdown."""

    def test_start_creates_database_file(self, file_settings: Settings, tmp_path):
        """Startup creates the directory, file and table."""
        with Application(file_settings) as application:
            assert application.is_running
            assert application.store.count() == 0

        assert (tmp_path / "db" / "catalog.db").exists()

    def test_shutdown_releases_components(self, file_settings: Settings):
        """Components are unavailable after shutdown."""
        application = Application(file_settings).start()
        application.shutdown()

        assert application.is_running is False
        with pytest.raises(RuntimeError):
            _ = application.store

    def test_shutdown_before_start_is_noop(self, file_settings: Settings):
        Application(file_settings).shutdown()

    def test_products_survive_restart(self, file_settings: Settings):
        """Persisted products are reloaded by the next run."""
        with Application(file_settings) as application:
            application.add_flow.open()
            application.add_flow.submit(ProductForm(name="Widget", price="12.50"))

        with Application(file_settings) as application:
            products = application.view_model.products

        assert [(p.name, p.price) for p in products] == [("Widget", 12.50)]

    def test_add_flow_updates_view_model(self, file_settings: Settings):
        """The wired view model follows the wired add flow."""
        with Application(file_settings) as application:
            application.add_flow.open()
            application.add_flow.submit(ProductForm(name="Widget", price="1"))

            assert application.add_flow.state == FlowState.IDLE
            assert [row.name for row in application.view_model.rows()] == ["Widget"]


class TestSampleData:
    """Tests for seed_sample_data."""

    def test_seed_on_empty_store(self, tmp_path):
        """An empty store receives the sample product."""
        settings = Settings(
            _env_file=None,
            database_url=f"sqlite:///{tmp_path}/catalog.db",
            seed_sample_data=True,
        )

        with Application(settings) as application:
            detail = application.view_model.detail(application.view_model.products[0].id)

        assert detail.name == "New Product"
        assert detail.description == "Product Description"
        assert detail.price == 10.0
        assert detail.provider == "Provider"

    def test_seed_skipped_when_not_empty(self, db_manager: DatabaseManager, add_product):
        """Existing products suppress the sample."""
        add_product(name="Widget")
        settings = Settings(_env_file=None, database_url="sqlite://", seed_sample_data=True)

        assert DatabaseInitializer(db_manager, settings).seed_sample_product() is None


class TestFatalStartup:
    """Tests for the only fatal path: the store cannot be opened."""

    def test_unopenable_store_is_fatal(self, tmp_path):
        """A database path under a regular file aborts startup."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        settings = Settings(
            _env_file=None,
            database_url=f"sqlite:///{blocker}/catalog.db",
        )

        application = Application(settings)
        with pytest.raises(AppException) as exc_info:
            application.start()

        assert exc_info.value.code == "STORE_UNAVAILABLE"
        assert exc_info.value.fatal is True
        assert application.is_running is False

    def test_error_dict(self):
        """Errors render a display dictionary."""
        error = AppException("Price must be a number", "INVALID_PRICE", {"price": "abc"})

        payload = error.to_dict()

        assert payload["success"] is False
        assert payload["error"]["code"] == "INVALID_PRICE"
        assert payload["error"]["details"] == {"price": "abc"}
