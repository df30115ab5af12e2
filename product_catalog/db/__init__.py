"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM model.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
├── models.py     - Product ORM model
└── init_db.py    - DatabaseInitializer for setup

Usage:
------
    from product_catalog.db import DatabaseManager, Product, init_db

    db_manager = DatabaseManager("sqlite:///products.db")
    init_db(db_manager)

==============================================================================
"""

from .database import DatabaseManager, Base
from .models import Product, new_product_id
from .init_db import DatabaseInitializer, init_db

__all__ = [
    # Database management
    "DatabaseManager",
    "Base",
    # Models
    "Product",
    "new_product_id",
    # Initialization
    "DatabaseInitializer",
    "init_db",
]
