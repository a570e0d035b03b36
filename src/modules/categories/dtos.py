"""Category DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

- ``CreateCategoryDTO``: input for category creation.
- ``UpdateCategoryDTO``: input for partial category updates.
- ``CategoryOutputDTO``: output with all category fields.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any, Dict
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.categories.models import Category

Name = Annotated[str, Field(max_length=255)]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCategoryDTO(BaseModel):
    """Immutable DTO for category creation requests."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Name
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v


class UpdateCategoryDTO(BaseModel):
    """Immutable DTO for partial category updates.

    Only fields present in the request are applied; see ``changes()``.
    Sending ``null`` for a field is rejected rather than treated as absent.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Name | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Name must not be null.")
        if not v:
            raise ValueError("Name must not be empty.")
        return v

    @field_validator("description")
    @classmethod
    def description_must_not_be_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Description must not be null.")
        return v

    def changes(self) -> Dict[str, Any]:
        """Return only the fields that were explicitly supplied."""
        return self.model_dump(include=self.model_fields_set)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CategoryOutputDTO(BaseModel):
    """Immutable DTO for category responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> CategoryOutputDTO:
        """Build an output DTO from a Category model instance."""
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
