"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Price text validation

==============================================================================
"""

from .validators import PriceValidator, price_validator

__all__ = [
    "PriceValidator",
    "price_validator",
]
