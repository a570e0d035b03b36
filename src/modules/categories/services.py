"""Category service layer (Use Cases).

Orchestrates business logic for the Category aggregate, delegating
persistence to the injected ``ICategoryRepository``.

Business rules enforced here:
- Name must not be empty (validated by DTO).
- Partial update touches only supplied fields; a request with no fields
  is a no-op and leaves ``updated_at`` unchanged.
- Deleting a category removes its products through the repository's
  cascade contract; the service does not delete products itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category
from modules.core.translators import storage_errors

if TYPE_CHECKING:
    from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases.

    Receives an ``ICategoryRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_category(self, dto: CreateCategoryDTO) -> Category:
        """Create a new category with a fresh id and timestamps."""
        category = Category(name=dto.name, description=dto.description)
        with storage_errors():
            category = self._repo.save(category)
        logger.info("category.created", category_id=str(category.id))
        return category

    @transaction.atomic
    def update_category(self, id: str, dto: UpdateCategoryDTO) -> Category:
        """Apply the supplied fields to an existing category.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        changes = dto.changes()
        with storage_errors(not_found=CategoryNotFound):
            category = self._repo.update(id, changes)
        logger.info(
            "category.updated", category_id=str(id), fields=sorted(changes)
        )
        return category

    @transaction.atomic
    def delete_category(self, id: str) -> None:
        """Delete a category and, by cascade, its products.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        with storage_errors(not_found=CategoryNotFound):
            self._repo.delete(id)
        logger.info("category.deleted", category_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_categories(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Category]:
        """Return a list of categories, optionally filtered."""
        with storage_errors():
            return self._repo.find_all(filters)

    def get_category(self, id: str) -> Category:
        """Retrieve a single category by ID.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        with storage_errors(not_found=CategoryNotFound):
            category = self._repo.find_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")
        logger.info("category.retrieved", category_id=str(id))
        return category
