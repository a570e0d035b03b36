"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from modules.core.repositories.django_repository import DjangoRepository
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(DjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    model = Product
