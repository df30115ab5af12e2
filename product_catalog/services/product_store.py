"""
==============================================================================
Product Store Module
==============================================================================

Durable storage and retrieval of Product records.

This module implements:
- ProductStore: create / persist / load-all-sorted over one long-lived
  SQLAlchemy session

Record Lifecycle:
----------------
    create()  → pending (in memory only)
    persist() → written to the database, listeners notified
    discard() → pending records dropped (all, or the ones given)

A failed persist() rolls back the database transaction but keeps the
pending records, so the caller may retry persist() or discard().

Ordering:
--------
load_all() sorts by name ascending with NULL names first, then by id.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_catalog.core import exceptions
from product_catalog.db.database import DatabaseManager
from product_catalog.db.models import Product, new_product_id
from product_catalog.schemas.product import ProductCreate


# Module logger
logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class ProductStore:
    """
    Record store for products.

    The store is not thread-safe; all calls are expected on one thread.

    Attributes:
        _db_manager: DatabaseManager owning the engine
        _session: Session used for every operation
        _pending: Records created but not yet persisted
        _listeners: Callbacks invoked after a successful persist

    Example:
        >>> store = ProductStore(db_manager)
        >>> product = store.create(ProductCreate(name="Widget", price=9.99))
        >>> store.persist()
        >>> [p.name for p in store.load_all()]
        ['Widget']
    """

    def __init__(self, db_manager: DatabaseManager) -> None:
        """
        Initialize the store.

        Args:
            db_manager: DatabaseManager for the catalog database
        """
        self._db_manager = db_manager
        self._session: Session = db_manager.get_session()
        self._pending: List[Product] = []
        self._listeners: List[ChangeListener] = []

    @property
    def session(self) -> Session:
        """Underlying SQLAlchemy session."""
        return self._session

    @property
    def pending_count(self) -> int:
        """Number of records awaiting persist()."""
        return len(self._pending)

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create(self, data: ProductCreate) -> Product:
        """
        Allocate a new product with a fresh id.

        The record lives only in memory until persist() succeeds.

        Args:
            data: Field values for the new product

        Returns:
            The new (pending) Product
        """
        product = Product(
            id=new_product_id(),
            name=data.name,
            description=data.description,
            price=data.price,
            provider=data.provider,
        )

        self._session.add(product)
        self._pending.append(product)

        logger.debug(f"Product created (pending): {product.id}")
        return product

    def persist(self) -> None:
        """
        Flush pending records to the database.

        Raises:
            AppException: PERSISTENCE_FAILED if the commit fails. Pending
                records are kept for a retry or discard().
        """
        if not self._pending:
            return

        try:
            self._session.add_all(self._pending)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                f"❌ Persist failed, {len(self._pending)} product(s) still pending: {e}"
            )
            raise exceptions.persistence_failed(str(e), len(self._pending)) from e

        saved = len(self._pending)
        self._pending.clear()

        logger.info(f"✅ Persisted {saved} product(s)")
        self._notify()

    def discard(self, *products: Product) -> int:
        """
        Drop pending records.

        Args:
            *products: Pending records to drop; all of them when omitted.
                Records that are not pending are ignored.

        Returns:
            Number of records discarded
        """
        if products:
            dropped = [p for p in self._pending if any(p is q for q in products)]
        else:
            dropped = list(self._pending)

        for product in dropped:
            self._pending.remove(product)
            if product in self._session:
                self._session.expunge(product)

        if dropped:
            logger.info(f"Discarded {len(dropped)} pending product(s)")
        return len(dropped)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def load_all(self) -> List[Product]:
        """
        Get all persisted products sorted by name.

        Returns:
            Products in ascending name order, NULL names first,
            equal names ordered by id
        """
        return (
            self._session.query(Product)
            .order_by(Product.name.asc().nulls_first(), Product.id.asc())
            .all()
        )

    def get(self, product_id: str) -> Product:
        """
        Get a persisted product by id.

        Raises:
            AppException: PRODUCT_NOT_FOUND if no such product exists
        """
        product = self._session.get(Product, product_id)

        if product is None:
            logger.warning(f"Product not found: {product_id}")
            raise exceptions.product_not_found(product_id)

        return product

    def count(self) -> int:
        """Number of persisted products."""
        return self._session.query(func.count(Product.id)).scalar()

    # =========================================================================
    # CHANGE NOTIFICATION
    # =========================================================================

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Register a callback run after each successful persist.

        A listener that raises is logged; the persist still counts as done
        and the remaining listeners still run.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.exception(f"❌ Change listener {listener!r} failed: {e}")

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def close(self) -> None:
        """Discard pending records and close the session."""
        self.discard()
        self._session.close()
        self._listeners.clear()

    def __enter__(self) -> "ProductStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        return f"ProductStore(db={self._db_manager!r}, pending={len(self._pending)})"
