"""Product model with two price points and stock control.

Business rules implemented:
- Product belongs to an existing Category (FK, cascade on category delete).
- ``price_av`` and ``price_ap`` must be greater than zero.
- Stock quantity cannot be negative.
- Name must not be empty.

Every rule is validated by the DTOs before a write and backed by a
database constraint for writes that race past that validation.
"""

from __future__ import annotations

from django.db import models

from modules.categories.models import Category
from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root.

    ``price_av`` and ``price_ap`` are two independent price points
    (e.g. list and sale price), stored as exact ``DECIMAL(12, 2)``.
    """

    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name="products",
    )
    name = models.CharField(max_length=255)
    description = models.TextField()
    price_av = models.DecimalField(max_digits=12, decimal_places=2)
    price_ap = models.DecimalField(max_digits=12, decimal_places=2)
    stock_quantity = models.PositiveIntegerField(default=0)
    image_url = models.CharField(max_length=2048)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price_av__gt=0),
                name="products_price_av_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(price_ap__gt=0),
                name="products_price_ap_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock_quantity__gte=0),
                name="products_stock_non_negative",
            ),
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="products_name_not_empty",
            ),
        ]

    def __str__(self) -> str:
        return self.name
