"""
==============================================================================
Product Catalog - Application Entry Point
==============================================================================

Owns the catalog's components and their lifecycle:
- DatabaseManager and ProductStore (opened at startup, closed at shutdown)
- CatalogViewModel (query layer)
- AddProductFlow (add-product form)

Usage:
------
    with Application() as application:
        application.view_model.search_text = "widget"
        rows = application.view_model.rows()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from product_catalog.catalog.view_model import CatalogViewModel
from product_catalog.config import Settings, get_settings
from product_catalog.core.exceptions import AppException
from product_catalog.db import DatabaseManager, init_db
from product_catalog.services import AddProductFlow, ProductStore


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


class Application:
    """
    Application lifecycle manager.

    Handles:
    - Logging setup
    - Opening the record store (fatal on failure)
    - Wiring the view model and add flow to the store
    - Orderly shutdown
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the application (nothing is opened yet)."""
        self._settings = settings or get_settings()
        self._db_manager: Optional[DatabaseManager] = None
        self._store: Optional[ProductStore] = None
        self._view_model: Optional[CatalogViewModel] = None
        self._add_flow: Optional[AddProductFlow] = None

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> "Application":
        """
        Open the store and build the components.

        Raises:
            AppException: STORE_UNAVAILABLE if the store cannot be opened.
                The process cannot continue.
        """
        configure_logging(self._settings)

        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        db_manager = DatabaseManager(
            self._settings.database_url,
            echo=self._settings.debug,
        )

        try:
            init_db(db_manager, self._settings)
        except AppException as e:
            logger.critical(f"❌ {e.message}")
            db_manager.dispose()
            raise

        self._db_manager = db_manager
        self._store = ProductStore(db_manager)
        self._view_model = CatalogViewModel(self._store)
        self._add_flow = AddProductFlow(self._store)

        logger.info(f"✅ {self._settings.app_name} ready ({self._store.count()} products)")
        return self

    def shutdown(self) -> None:
        """Close the components in reverse order."""
        if self._db_manager is None:
            return

        logger.info("🛑 Shutting down...")

        self._view_model.close()
        self._store.close()
        self._db_manager.dispose()

        self._view_model = None
        self._add_flow = None
        self._store = None
        self._db_manager = None

        logger.info("✅ Shutdown complete")

    def __enter__(self) -> "Application":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.shutdown()
        return False

    # =========================================================================
    # COMPONENTS
    # =========================================================================

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def is_running(self) -> bool:
        return self._db_manager is not None

    @property
    def store(self) -> ProductStore:
        self._require_running()
        return self._store

    @property
    def view_model(self) -> CatalogViewModel:
        self._require_running()
        return self._view_model

    @property
    def add_flow(self) -> AddProductFlow:
        self._require_running()
        return self._add_flow

    def _require_running(self) -> None:
        if not self.is_running:
            raise RuntimeError("Application has not been started")
