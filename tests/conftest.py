"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides in-memory database, store, view model and add-flow fixtures.

==============================================================================
"""

import pytest
from typing import Callable, Generator, Optional

from sqlalchemy import text

from product_catalog.catalog.view_model import CatalogViewModel
from product_catalog.db.database import DatabaseManager
from product_catalog.db.models import Product
from product_catalog.schemas.product import ProductCreate
from product_catalog.services.add_product_flow import AddProductFlow
from product_catalog.services.product_store import ProductStore


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Create a fresh in-memory database for each test."""
    manager = DatabaseManager(SQLALCHEMY_TEST_DATABASE_URL)
    manager.create_tables()
    try:
        yield manager
    finally:
        manager.drop_tables()
        manager.dispose()


@pytest.fixture
def hidden_products_table(db_manager: DatabaseManager) -> Generator[Callable[[], None], None, None]:
    """
    Rename the products table so real writes fail.

    Yields a function that puts the table back; teardown calls it too.
    """
    state = {"hidden": True}

    def _rename(old: str, new: str) -> None:
        with db_manager.engine.begin() as conn:
            conn.execute(text(f"ALTER TABLE {old} RENAME TO {new}"))

    def restore() -> None:
        if state["hidden"]:
            _rename("products_moved", "products")
            state["hidden"] = False

    _rename("products", "products_moved")
    try:
        yield restore
    finally:
        restore()


@pytest.fixture(scope="function")
def store(db_manager: DatabaseManager) -> Generator[ProductStore, None, None]:
    """Record store over the test database."""
    product_store = ProductStore(db_manager)
    try:
        yield product_store
    finally:
        product_store.close()


@pytest.fixture
def view_model(store: ProductStore) -> Generator[CatalogViewModel, None, None]:
    """Catalog view model observing the test store."""
    model = CatalogViewModel(store)
    yield model
    model.close()


@pytest.fixture
def add_flow(store: ProductStore) -> AddProductFlow:
    """Add-product flow writing to the test store."""
    return AddProductFlow(store)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def add_product(store: ProductStore) -> Callable[..., Product]:
    """Factory that creates and persists a product."""
    def _add(
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: float = 1.0,
        provider: Optional[str] = None,
    ) -> Product:
        product = store.create(ProductCreate(
            name=name,
            description=description,
            price=price,
            provider=provider,
        ))
        store.persist()
        return product

    return _add


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for detached products (no database)."""
    counter = iter(range(10_000))

    def _make(name: Optional[str] = None, description: Optional[str] = None) -> Product:
        return Product(
            id=f"product-{next(counter)}",
            name=name,
            description=description,
            price=1.0,
        )

    return _make
