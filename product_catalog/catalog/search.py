"""
==============================================================================
Product Search Module
==============================================================================

Pure search filter over an ordered product sequence.

Matching Rules:
--------------
- Empty search text matches every product
- Otherwise a product matches when its name OR description contains the
  search text, ignoring case (str.casefold)
- A NULL name or description never matches
- Output keeps the input order

==============================================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from product_catalog.db.models import Product


def _contains(field: Optional[str], needle: str) -> bool:
    if field is None:
        return False
    return needle in field.casefold()


def matches_search(product: Product, search_text: str) -> bool:
    """
    Check a single product against the search text.

    Args:
        product: Product to test
        search_text: Text typed into the search field

    Returns:
        True if the product should be visible
    """
    if not search_text:
        return True

    needle = search_text.casefold()
    return _contains(product.name, needle) or _contains(product.description, needle)


def filter_products(products: Iterable[Product], search_text: str) -> List[Product]:
    """
    Filter products by search text.

    Example:
        >>> [p.name for p in filter_products(products, "WID")]
        ['Widget', 'Wide Shelf']
    """
    if not search_text:
        return list(products)

    return [product for product in products if matches_search(product, search_text)]
