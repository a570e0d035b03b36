"""Category repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the Category aggregate.

    ``delete`` must also remove every Product that references the
    category, atomically.  The Django adapter gets this from the FK's
    ``on_delete=CASCADE``; an adapter for a store without cascading
    foreign keys has to delete the products itself inside the same
    transaction.
    """
