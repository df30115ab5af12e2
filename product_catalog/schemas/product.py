"""
==============================================================================
Product Schemas Module
==============================================================================

Data exchanged with the presentation layer.

Includes:
- ProductForm: raw text collected by the add-product form
- ProductCreate: validated values for a new record
- ProductDetail / ProductListItem: display projections with fallbacks

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from product_catalog.core import exceptions
from product_catalog.db.models import Product
from product_catalog.utils.validators import price_validator


# Fallback display values for null fields
UNKNOWN = "Unknown"
NO_DESCRIPTION = "No description"


# =============================================================================
# CREATE SCHEMAS
# =============================================================================

class ProductCreate(BaseModel):
    """Field values for a new product. No emptiness checks."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: float = Field(..., allow_inf_nan=False)
    provider: Optional[str] = None


class ProductForm(BaseModel):
    """
    Add-product form contents.

    Every field is text exactly as typed; price is parsed on submit,
    ignoring surrounding whitespace. The other fields are stored verbatim.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    provider: Optional[str] = None

    def to_create(self) -> ProductCreate:
        """
        Parse the form into creation values.

        Raises:
            AppException: INVALID_PRICE if price is not a number
        """
        valid, price, _ = price_validator.validate(self.price)
        if not valid:
            raise exceptions.invalid_price(self.price)

        return ProductCreate(
            name=self.name,
            description=self.description,
            price=price,
            provider=self.provider,
        )


# =============================================================================
# DISPLAY SCHEMAS
# =============================================================================

class ProductDetail(BaseModel):
    """Detail view of a single product with fallbacks applied."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    price: float
    provider: str

    @property
    def price_label(self) -> str:
        return f"Price: ${self.price:.2f}"

    @property
    def provider_label(self) -> str:
        return f"Provider: {self.provider}"

    @classmethod
    def from_product(cls, product: Product) -> "ProductDetail":
        """Create detail view from Product model."""
        return cls(
            id=product.id,
            name=display_name(product),
            description=display_description(product),
            price=product.price,
            provider=display_provider(product),
        )


class ProductListItem(BaseModel):
    """Row in the product list."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float

    @classmethod
    def from_product(cls, product: Product) -> "ProductListItem":
        return cls(id=product.id, name=display_name(product), price=product.price)


# =============================================================================
# DISPLAY ACCESSORS
# =============================================================================

def display_name(product: Product) -> str:
    return product.name if product.name is not None else UNKNOWN


def display_description(product: Product) -> str:
    return product.description if product.description is not None else NO_DESCRIPTION


def display_provider(product: Product) -> str:
    return product.provider if product.provider is not None else UNKNOWN
