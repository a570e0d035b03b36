"""User service layer (Use Cases).

Business rules enforced here:
- Email must be unique: checked before the insert, and the UNIQUE index
  turns a concurrent duplicate into the same Conflict.
- Email format, non-empty names and the role set are validated by DTO.

Users have no update or delete use case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.translators import storage_errors
from modules.users.exceptions import UserAlreadyExists
from modules.users.models import User

if TYPE_CHECKING:
    from modules.users.dtos import CreateUserDTO
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserService:
    """Application service for User use-cases.

    Receives an ``IUserRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def create_user(self, dto: CreateUserDTO) -> User:
        """Create a new user.

        Raises:
            UserAlreadyExists: if the email is already registered.
        """
        log = logger.bind(email=dto.email, role=str(dto.role))

        with storage_errors():
            existing = self._repo.find_by_email(dto.email)
        if existing:
            log.warning("user.duplicate_email")
            raise UserAlreadyExists()

        user = User(
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
            role=dto.role.value,
        )
        with storage_errors(conflict=UserAlreadyExists):
            user = self._repo.save(user)
        log.info("user.created", user_id=str(user.id))
        return user

    def list_users(self, filters: Optional[Dict[str, Any]] = None) -> List[User]:
        """Return a list of users, optionally filtered."""
        with storage_errors():
            return self._repo.find_all(filters)
