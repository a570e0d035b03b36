"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Prices must be greater than zero (validated by DTO).
- Stock cannot be negative (validated by DTO).
- ``category_id`` must reference an existing category, on creation and
  whenever an update supplies it.  A dangling reference is a validation
  failure (``InvalidCategoryReference``), never a NotFound.
- Partial update touches only supplied fields; a request with no fields
  is a no-op and leaves ``updated_at`` unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.translators import parse_input, storage_errors
from modules.products.dtos import (
    CreateProductDTO,
    ProductCategoryReferenceDTO,
    UpdateProductDTO,
)
from modules.products.exceptions import InvalidCategoryReference, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from uuid import UUID

    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` and the ``ICategoryRepository`` used
    for reference checks via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._categories = category_repository

    def _ensure_category_exists(self, category_id: UUID) -> None:
        with storage_errors():
            category = self._categories.find_by_id(str(category_id))
        if category is None:
            logger.warning("product.invalid_category", category_id=str(category_id))
            raise InvalidCategoryReference(f"Category {category_id} does not exist.")

    def _ensure_product_exists(self, id: str) -> None:
        with storage_errors(not_found=ProductNotFound):
            product = self._repo.find_by_id(id)
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")

    def _check_category_reference(self, data: Any) -> None:
        reference = parse_input(ProductCategoryReferenceDTO, data)
        self._ensure_category_exists(reference.category_id)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product_from_input(self, data: Any) -> Product:
        """Create a product from a raw request payload.

        The category reference is resolved before the remaining fields are
        validated, so a dangling ``category_id`` is reported even when other
        fields are also invalid.

        Raises:
            ValidationFailed: if ``category_id`` is missing or malformed, or
                any other field is invalid.
            InvalidCategoryReference: if ``category_id`` does not exist.
        """
        self._check_category_reference(data)
        return self._insert(parse_input(CreateProductDTO, data))

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product in an existing category.

        Raises:
            InvalidCategoryReference: if ``category_id`` does not exist.
        """
        self._ensure_category_exists(dto.category_id)
        return self._insert(dto)

    def _insert(self, dto: CreateProductDTO) -> Product:
        product = Product(
            category_id=dto.category_id,
            name=dto.name,
            description=dto.description,
            price_av=dto.price_av,
            price_ap=dto.price_ap,
            stock_quantity=dto.stock_quantity,
            image_url=dto.image_url,
        )
        with storage_errors(invalid_reference=InvalidCategoryReference):
            product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            category_id=str(product.category_id),
        )
        return product

    @transaction.atomic
    def update_product_from_input(self, id: str, data: Any) -> Product:
        """Apply a raw partial-update payload to an existing product.

        Checks run in order: the product exists, then a supplied
        ``category_id`` resolves, then the remaining fields validate.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidCategoryReference: if a supplied ``category_id`` does
                not exist.
            ValidationFailed: if any supplied field is invalid.
        """
        self._ensure_product_exists(id)
        if isinstance(data, Mapping) and data.get("category_id") is not None:
            self._check_category_reference(data)
        dto = parse_input(UpdateProductDTO, data)
        return self._write_update(id, dto.changes())

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidCategoryReference: if a supplied ``category_id`` does
                not exist.
        """
        self._ensure_product_exists(id)
        changes = dto.changes()
        if "category_id" in changes:
            self._ensure_category_exists(changes["category_id"])
        return self._write_update(id, changes)

    def _write_update(self, id: str, changes: Dict[str, Any]) -> Product:
        with storage_errors(
            not_found=ProductNotFound,
            invalid_reference=InvalidCategoryReference,
        ):
            product = self._repo.update(id, changes)
        logger.info("product.updated", product_id=str(id), fields=sorted(changes))
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        with storage_errors(not_found=ProductNotFound):
            self._repo.delete(id)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return a list of products, optionally filtered."""
        with storage_errors():
            return self._repo.find_all(filters)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        with storage_errors(not_found=ProductNotFound):
            product = self._repo.find_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return product
