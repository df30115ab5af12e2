"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the catalog's write path.

This package provides:
- ProductStore: Record store over the database
- AddProductFlow: Add-product form state machine

    ┌─────────────────┐
    │ AddProductFlow  │  ← Form workflow
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  ProductStore   │  ← Persistence
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ DatabaseManager │  ← SQLAlchemy
    └─────────────────┘

Services receive their dependencies via constructor.

==============================================================================
"""

from .product_store import ProductStore
from .add_product_flow import AddProductFlow, FlowState

__all__ = [
    "ProductStore",
    "AddProductFlow",
    "FlowState",
]
