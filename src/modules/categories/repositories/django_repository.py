"""Django ORM implementation of the Category repository."""

from __future__ import annotations

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.core.repositories.django_repository import DjangoRepository


class CategoryDjangoRepository(DjangoRepository[Category], ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    model = Category
