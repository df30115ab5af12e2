"""
==============================================================================
Schemas Package
==============================================================================

Pydantic models exchanged with the presentation layer.

==============================================================================
"""

from .product import (
    NO_DESCRIPTION,
    UNKNOWN,
    ProductCreate,
    ProductDetail,
    ProductForm,
    ProductListItem,
    display_description,
    display_name,
    display_provider,
)

__all__ = [
    # Constants
    "UNKNOWN",
    "NO_DESCRIPTION",
    # Schemas
    "ProductCreate",
    "ProductForm",
    "ProductDetail",
    "ProductListItem",
    # Accessors
    "display_name",
    "display_description",
    "display_provider",
]
