"""
==============================================================================
Database Initialization Module
==============================================================================

Database setup for the record store.

Initialization Flow:
-------------------
1. Create the database directory (SQLite files)
2. Verify the database answers
3. Create tables from ORM models
4. Optionally seed one sample product into an empty store

Any failure here is fatal: the application cannot run without its store.

Usage:
------
    from product_catalog.db import init_db

    init_db(db_manager, settings)

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from product_catalog.config import Settings, get_settings
from product_catalog.core import exceptions
from product_catalog.db.database import DatabaseManager
from product_catalog.db.models import Product, new_product_id


# Module logger
logger = logging.getLogger(__name__)

SAMPLE_PRODUCT = {
    "name": "New Product",
    "description": "Product Description",
    "price": 10.0,
    "provider": "Provider",
}


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager for the store
        _settings: Application settings

    Example:
        >>> initializer = DatabaseInitializer(db_manager, settings)
        >>> initializer.initialize()
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        settings: Optional[Settings] = None
    ) -> None:
        self._db_manager = db_manager
        self._settings = settings or get_settings()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables (idempotent)."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    def verify_tables(self) -> bool:
        """
        Verify that the products table can be queried.

        Returns:
            True if the table exists, False otherwise
        """
        try:
            with self._db_manager.session_scope() as session:
                session.query(Product).first()
            logger.debug("Database tables verified successfully")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Table verification failed: {e}")
            return False

    # =========================================================================
    # SAMPLE DATA
    # =========================================================================

    def seed_sample_product(self) -> Optional[Product]:
        """
        Insert the sample product if the store is empty.

        Returns:
            Created Product, or None if the store already has records
        """
        with self._db_manager.session_scope() as session:
            if session.query(Product).first() is not None:
                logger.info("Store already has products, skipping sample data")
                return None

            product = Product(id=new_product_id(), **SAMPLE_PRODUCT)
            session.add(product)

        logger.info(f"✅ Sample product created: {product.id}")
        return product

    # =========================================================================
    # FULL INITIALIZATION
    # =========================================================================

    def initialize(self) -> None:
        """
        Run the full initialization flow.

        Raises:
            AppException: STORE_UNAVAILABLE (fatal) if the store cannot be
                opened or prepared
        """
        logger.info("Initializing record store...")

        try:
            self._settings.ensure_directories()
            self._db_manager.verify_connection()
            self.create_tables()

            if not self.verify_tables():
                raise exceptions.store_unavailable("products table is not readable")

            if self._settings.seed_sample_data:
                self.seed_sample_product()

        except (OSError, SQLAlchemyError) as e:
            logger.critical(f"❌ Record store initialization failed: {e}")
            raise exceptions.store_unavailable(str(e)) from e

        logger.info("✅ Record store initialized")


def init_db(db_manager: DatabaseManager, settings: Optional[Settings] = None) -> None:
    """Convenience wrapper around DatabaseInitializer.initialize()."""
    DatabaseInitializer(db_manager, settings).initialize()
