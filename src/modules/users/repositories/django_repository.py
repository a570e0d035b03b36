"""Django ORM implementation of the User repository."""

from __future__ import annotations

from typing import Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.users.models import User
from modules.users.repositories.interfaces import IUserRepository


class UserDjangoRepository(DjangoRepository[User], IUserRepository):
    """Concrete User repository backed by Django ORM."""

    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email address (case-insensitive)."""
        return User.objects.filter(email__iexact=email.strip()).first()
