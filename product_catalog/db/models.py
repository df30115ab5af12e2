"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                          products                                │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (VARCHAR(36), PK, UUID4)                                     │
    │ name (VARCHAR, NULLABLE)                                        │
    │ description (TEXT, NULLABLE)                                    │
    │ price (FLOAT, NOT NULL)                                         │
    │ provider (VARCHAR, NULLABLE)                                    │
    └─────────────────────────────────────────────────────────────────┘

Flat collection: no relationships. Records are created once and never
updated or deleted.

=============================================================================
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Column, Float, String, Text

from product_catalog.db.database import Base


def new_product_id() -> str:
    """Generate a fresh product identifier."""
    return str(uuid.uuid4())


class Product(Base):
    """
    Product record.

    Attributes:
        id: Unique identifier (UUID), assigned once at creation
        name: Display name (nullable)
        description: Free-text description (nullable)
        price: Unit price
        provider: Supplier name (nullable)

    Display fallbacks for null fields live in
    ``product_catalog.schemas.product.ProductDetail``.
    """

    __tablename__ = "products"

    id: str = Column(
        String(36),
        primary_key=True,
        default=new_product_id,
        doc="Unique product identifier (UUID)"
    )

    name: Optional[str] = Column(
        String(255),
        nullable=True,
        index=True,
        doc="Product name"
    )

    description: Optional[str] = Column(
        Text,
        nullable=True,
        doc="Product description"
    )

    price: float = Column(
        Float,
        nullable=False,
        doc="Unit price"
    )

    provider: Optional[str] = Column(
        String(255),
        nullable=True,
        doc="Supplier name"
    )

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"Product(id={self.id!r}, "
            f"name={self.name!r}, "
            f"price={self.price!r}, "
            f"provider={self.provider!r})"
        )

    def __str__(self) -> str:
        return self.name if self.name is not None else self.id
