"""
==============================================================================
Catalog Package - Product Query Layer
==============================================================================

Sorted, searchable view over the record store.

Classes:
--------
- CatalogViewModel: Live list of products with search text

Functions:
----------
- filter_products: Pure substring filter on name/description
- matches_search: Per-product predicate

==============================================================================
"""

from .search import filter_products, matches_search
from .view_model import CatalogViewModel

__all__ = [
    "filter_products",
    "matches_search",
    "CatalogViewModel",
]
