"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for user-entered form data.

This module implements:
- PriceValidator: Parses price text typed into the add-product form

Validation Rules for Prices:
---------------------------
- Surrounding whitespace is ignored
- Plain decimal or scientific notation: "12", "12.50", ".5", "-3", "1e3"
- No digit separators, currency symbols, words, "nan" or "inf"
- The parsed value must be finite
- No range checks (negative and zero prices are accepted)

==============================================================================
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple


class PriceValidator:
    """
    Validator for price text.

    Example:
        >>> validator = PriceValidator()
        >>> validator.validate(" 12.50 ")
        (True, 12.5, None)
        >>> validator.validate("abc")
        (False, None, 'Price must be a number')
    """

    PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

    def validate(self, text: Optional[str]) -> Tuple[bool, Optional[float], Optional[str]]:
        """
        Validate and parse a price.

        Args:
            text: Raw price input

        Returns:
            Tuple of (is_valid, price, error_message)
            - If valid: (True, 12.5, None)
            - If invalid: (False, None, "Error description")
        """
        if text is None:
            return False, None, "Price is required"

        text = text.strip()
        if not text:
            return False, None, "Price is required"

        if not self.PATTERN.match(text):
            return False, None, "Price must be a number"

        value = float(text)
        if not math.isfinite(value):
            return False, None, "Price is out of range"

        return True, value, None


# Module-level instance for convenience
price_validator = PriceValidator()
