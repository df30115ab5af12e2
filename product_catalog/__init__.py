"""
==============================================================================
Product Catalog
==============================================================================

Local product catalog: a searchable, name-sorted list of products backed by
a SQLite record store, with an add-product flow and detail views.

Packages:
--------
├── config/    - Pydantic settings
├── core/      - AppException and error factories
├── db/        - SQLAlchemy engine, Product model, initialization
├── schemas/   - Form and display models
├── services/  - ProductStore, AddProductFlow
├── catalog/   - Search filter, CatalogViewModel
├── utils/     - Price validation
└── main.py    - Application lifecycle

==============================================================================
"""

__version__ = "1.0.0"
