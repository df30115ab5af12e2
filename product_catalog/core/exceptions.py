"""
Application Exception Handling

Single AppException class for all catalog errors.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides a consistent error shape for the presentation layer.

    Usage:
        raise AppException("Price must be a number", "INVALID_PRICE")
        raise AppException("Store unavailable", "STORE_UNAVAILABLE", fatal=True)

    Error Codes:
        Validation:
            - INVALID_PRICE

        Persistence:
            - PERSISTENCE_FAILED
            - STORE_UNAVAILABLE (fatal)

        Lookup:
            - PRODUCT_NOT_FOUND

        Add flow:
            - INVALID_TRANSITION
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        fatal: bool = False
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_PRICE")
            details: Additional error context (optional)
            fatal: True when the process cannot continue
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.fatal = fatal
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for display."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_price(text: Optional[str]) -> AppException:
    """Create invalid price exception."""
    return AppException(
        "Price must be a number",
        "INVALID_PRICE",
        {"price": text}
    )


def persistence_failed(reason: str, pending: int = 0) -> AppException:
    """Create persistence failure exception."""
    return AppException(
        f"Could not save changes: {reason}",
        "PERSISTENCE_FAILED",
        {"pending": pending}
    )


def store_unavailable(reason: str) -> AppException:
    """Create fatal store-open exception."""
    return AppException(
        f"Record store could not be opened: {reason}",
        "STORE_UNAVAILABLE",
        fatal=True
    )


def product_not_found(product_id: Optional[str] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", details)


def invalid_transition(current: str, action: str) -> AppException:
    """Create invalid add-flow transition exception."""
    return AppException(
        f"Cannot {action} while {current}",
        "INVALID_TRANSITION",
        {"current_state": current, "action": action}
    )
