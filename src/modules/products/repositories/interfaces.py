"""Product repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    ``save`` and ``update`` must reject a ``category_id`` that does not
    reference an existing category (foreign key) and prices/stock outside
    their ranges (check constraints), raising ``IntegrityError``.
    """
