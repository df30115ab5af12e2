"""
==============================================================================
Catalog View Model Module
==============================================================================

Sorted and filtered view over the record store.

Refresh Contract:
----------------
The view model subscribes to the store. Every successful persist triggers
refresh(), which reloads all products and re-applies the current search.
Changing ``search_text`` re-applies the filter over the loaded products.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List

from product_catalog.catalog.search import filter_products
from product_catalog.db.models import Product
from product_catalog.schemas.product import ProductDetail, ProductListItem
from product_catalog.services.product_store import ProductStore


# Module logger
logger = logging.getLogger(__name__)


class CatalogViewModel:
    """
    Live product list with search.

    Attributes:
        _store: Record store to read from
        _products: All products, sorted by name
        _visible: Products matching the current search
        _search_text: Current search text

    Example:
        >>> view_model = CatalogViewModel(store)
        >>> view_model.search_text = "widget"
        >>> [row.name for row in view_model.rows()]
        ['Widget']
    """

    def __init__(self, store: ProductStore) -> None:
        """
        Initialize and load products from the store.

        Args:
            store: Record store to observe
        """
        self._store = store
        self._products: List[Product] = []
        self._visible: List[Product] = []
        self._search_text = ""
        self._unsubscribe = store.subscribe(self.refresh)

        self.refresh()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """All products (copy)."""
        return self._products.copy()

    @property
    def visible_products(self) -> List[Product]:
        """Products matching the current search (copy)."""
        return self._visible.copy()

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        self._search_text = value or ""
        self._apply_filter()

    # =========================================================================
    # LOADING
    # =========================================================================

    def refresh(self) -> None:
        """Reload products from the store and re-apply the search."""
        self._products = self._store.load_all()
        self._apply_filter()
        logger.debug(f"Catalog refreshed: {len(self._products)} products")

    def _apply_filter(self) -> None:
        self._visible = filter_products(self._products, self._search_text)

    # =========================================================================
    # PRESENTATION
    # =========================================================================

    def rows(self) -> List[ProductListItem]:
        """List rows for the visible products."""
        return [ProductListItem.from_product(product) for product in self._visible]

    def detail(self, product_id: str) -> ProductDetail:
        """
        Detail view for one product.

        Raises:
            AppException: PRODUCT_NOT_FOUND if the id is unknown
        """
        return ProductDetail.from_product(self._store.get(product_id))

    def close(self) -> None:
        """Stop observing the store."""
        self._unsubscribe()
