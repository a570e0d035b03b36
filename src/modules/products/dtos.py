"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductCategoryReferenceDTO``: the ``category_id`` of a raw payload.
- ``ProductOutputDTO``: output with all product fields.

Field order is validation order: the first reported error names the
first failing field. The category reference is checked by the service
before any other field.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Any, Dict
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product

Price = Annotated[Decimal, Field(max_digits=12, decimal_places=2)]
Name = Annotated[str, Field(max_length=255)]
ImageUrl = Annotated[str, Field(max_length=2048)]
# Upper bound of a 32-bit signed INTEGER column.
StockQuantity = Annotated[int, Field(le=2_147_483_647)]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name``, ``description`` and ``image_url`` are non-empty strings.
    - ``price_av`` and ``price_ap`` are Decimals greater than zero.
    - ``name`` fits 255 characters and ``image_url`` 2048.
    - ``stock_quantity`` is non-negative and fits a 32-bit integer.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category_id: UUID
    name: Name
    description: str
    price_av: Price
    price_ap: Price
    stock_quantity: StockQuantity
    image_url: ImageUrl

    @field_validator("name", "description", "image_url")
    @classmethod
    def must_not_be_empty(cls, v: str, info) -> str:
        if not v:
            raise ValueError(f"{info.field_name} must not be empty.")
        return v

    @field_validator("price_av", "price_ap")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for partial product updates.

    All fields are optional; only supplied fields are applied (see
    ``changes()``).  Supplied fields get the same checks as on creation,
    and an explicit ``null`` is rejected.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category_id: UUID | None = None
    name: Name | None = None
    description: str | None = None
    price_av: Price | None = None
    price_ap: Price | None = None
    stock_quantity: StockQuantity | None = None
    image_url: ImageUrl | None = None

    @field_validator("*")
    @classmethod
    def must_not_be_null(cls, v: Any, info) -> Any:
        if v is None:
            raise ValueError(f"{info.field_name} must not be null.")
        return v

    @field_validator("name", "description", "image_url")
    @classmethod
    def must_not_be_empty(cls, v: str, info) -> str:
        if not v:
            raise ValueError(f"{info.field_name} must not be empty.")
        return v

    @field_validator("price_av", "price_ap")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v

    def changes(self) -> Dict[str, Any]:
        """Return only the fields that were explicitly supplied."""
        return self.model_dump(include=self.model_fields_set)


class ProductCategoryReferenceDTO(BaseModel):
    """The category a product payload points at, read ahead of its other fields.

    Unrelated keys are ignored.
    """

    model_config = ConfigDict(frozen=True)

    category_id: UUID


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    category_id: UUID
    name: str
    description: str
    price_av: Decimal
    price_ap: Decimal
    stock_quantity: int
    image_url: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            category_id=product.category_id,
            name=product.name,
            description=product.description,
            price_av=product.price_av,
            price_ap=product.price_ap,
            stock_quantity=product.stock_quantity,
            image_url=product.image_url,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
