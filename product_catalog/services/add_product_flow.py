"""
==============================================================================
Add Product Flow Module
==============================================================================

State machine behind the add-product form.

State Machine:
-------------

    ┌──────┐  open()   ┌─────────┐  submit()  ┌────────────┐
    │ IDLE │ ────────▶ │ EDITING │ ─────────▶ │ SUBMITTING │
    └──────┘           └─────────┘            └────────────┘
       ▲                │     ▲                  │      │
       │    cancel()    │     │  invalid price / │      │ saved
       └────────────────┘     └── persist error ─┘      │
       ▲                                                │
       └────────────────────────────────────────────────┘

Errors never close the form: the user stays in EDITING with ``error`` set.

==============================================================================
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

from product_catalog.core import exceptions
from product_catalog.core.exceptions import AppException
from product_catalog.db.models import Product
from product_catalog.schemas.product import ProductForm
from product_catalog.services.product_store import ProductStore


# Module logger
logger = logging.getLogger(__name__)


class FlowState(str, enum.Enum):
    """
    Add-product form states.

    - IDLE: Form closed
    - EDITING: Form open, waiting for input
    - SUBMITTING: Record being created and saved
    """

    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value

    @property
    def is_open(self) -> bool:
        """Check if the form is visible in this state."""
        return self in (FlowState.EDITING, FlowState.SUBMITTING)


class AddProductFlow:
    """
    Drives the add-product form.

    Attributes:
        _store: Record store receiving new products
        _state: Current FlowState
        _error: Last validation or persistence error, if any

    Example:
        >>> flow = AddProductFlow(store)
        >>> flow.open()
        >>> flow.submit(ProductForm(name="Widget", price="abc"))
        >>> flow.state, flow.error.code
        (<FlowState.EDITING: 'editing'>, 'INVALID_PRICE')
        >>> product = flow.submit(ProductForm(name="Widget", price="9.99"))
        >>> flow.state
        <FlowState.IDLE: 'idle'>
    """

    def __init__(self, store: ProductStore) -> None:
        self._store = store
        self._state = FlowState.IDLE
        self._error: Optional[AppException] = None

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def error(self) -> Optional[AppException]:
        """Error to show on the open form."""
        return self._error

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def open(self) -> None:
        """
        Open the form.

        Raises:
            AppException: INVALID_TRANSITION unless IDLE
        """
        self._require(FlowState.IDLE, "open the form")
        self._error = None
        self._transition(FlowState.EDITING)

    def cancel(self) -> None:
        """
        Close the form without saving.

        Raises:
            AppException: INVALID_TRANSITION unless EDITING
        """
        self._require(FlowState.EDITING, "cancel")
        self._error = None
        self._transition(FlowState.IDLE)

    def submit(self, form: ProductForm) -> Optional[Product]:
        """
        Create and save a product from the form.

        Args:
            form: Text typed into the form

        Returns:
            The saved Product, or None if the form stays open with an error

        Raises:
            AppException: INVALID_TRANSITION unless EDITING

        Any other error propagates after the form is returned to EDITING
        and this submit's pending record is dropped.
        """
        self._require(FlowState.EDITING, "submit")
        self._transition(FlowState.SUBMITTING)

        product: Optional[Product] = None
        try:
            data = form.to_create()
            product = self._store.create(data)
            self._store.persist()
        except AppException as e:
            if product is None:
                logger.info(f"Add product rejected: {e.message} ({form.price!r})")
            else:
                self._store.discard(product)
            return self._fail(e)
        except Exception:
            if product is not None:
                self._store.discard(product)
            self._transition(FlowState.EDITING)
            logger.exception("❌ Add product failed unexpectedly")
            raise

        self._error = None
        self._transition(FlowState.IDLE)
        logger.info(f"✅ Product added: {product.id}")
        return product

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _require(self, expected: FlowState, action: str) -> None:
        if self._state != expected:
            raise exceptions.invalid_transition(self._state.value, action)

    def _transition(self, new_state: FlowState) -> None:
        logger.debug(f"Add flow: {self._state} → {new_state}")
        self._state = new_state

    def _fail(self, error: AppException) -> None:
        self._error = error
        self._transition(FlowState.EDITING)
        return None
