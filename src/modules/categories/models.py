"""Category model.

Business rules implemented:
- Name must not be empty (application + DB constraint).
- Description is optional but never NULL (empty string default).
- Deleting a category removes its products (FK ``on_delete=CASCADE``
  declared on ``Product.category``).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    """Category aggregate root."""

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="categories_name_not_empty",
            ),
        ]

    def __str__(self) -> str:
        return self.name
