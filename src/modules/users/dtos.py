"""User DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateUserDTO``: input for user creation.
- ``UserOutputDTO``: output with all user fields.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

if TYPE_CHECKING:
    from modules.users.models import User

PersonName = Annotated[str, Field(max_length=150)]


# ---------------------------------------------------------------------------
# Enum (framework-agnostic, not Django TextChoices)
# ---------------------------------------------------------------------------


class UserRoleEnum(StrEnum):
    """Closed set of recognised roles."""

    CUSTOMER = "customer"
    ADMIN = "admin"


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CreateUserDTO(BaseModel):
    """Immutable DTO for user creation requests.

    Validates:
    - ``email`` is a well-formed address (Pydantic ``EmailStr``), lower-cased.
    - ``first_name`` and ``last_name`` are non-empty.
    - ``role`` is one of ``UserRoleEnum`` (defaults to ``customer``).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    email: EmailStr
    first_name: PersonName
    last_name: PersonName
    role: UserRoleEnum = UserRoleEnum.CUSTOMER

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str, info) -> str:
        if not v:
            raise ValueError(f"{info.field_name} must not be empty.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class UserOutputDTO(BaseModel):
    """Immutable DTO for user responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> UserOutputDTO:
        """Build an output DTO from a User model instance."""
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
