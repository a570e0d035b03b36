"""Catalog user model.

This is the catalog's own User entity, unrelated to ``django.contrib.auth``.

Business rules implemented:
- Email must be unique in the system (stored lower-cased).
- Role is one of the closed set in ``UserRole``.
- Users are read-only after creation.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class UserRole(models.TextChoices):
    CUSTOMER = "customer", "Customer"
    ADMIN = "admin", "Admin"


class User(BaseModel):
    """User aggregate root.

    ``unique=True`` on ``email`` creates the UNIQUE index that backs the
    duplicate-email Conflict when two creations race.
    """

    email = models.EmailField(max_length=254, unique=True)
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.CUSTOMER,
    )

    class Meta:
        db_table = "users"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(role__in=UserRole.values),
                name="users_role_valid",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"
