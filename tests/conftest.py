from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product
from modules.users.models import User, UserRole


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_category():
    """Factory persisting a Category straight through the ORM."""

    def _make(**overrides) -> Category:
        defaults = {"name": "Electronics", "description": "desc"}
        defaults.update(overrides)
        return Category.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_product(make_category):
    """Factory persisting a Product (and a Category when none is given)."""

    def _make(**overrides) -> Product:
        if "category" not in overrides and "category_id" not in overrides:
            overrides["category"] = make_category()
        defaults = {
            "name": "Smartphone",
            "description": "A fine phone",
            "price_av": Decimal("699.99"),
            "price_ap": Decimal("799.99"),
            "stock_quantity": 50,
            "image_url": "https://x/y.jpg",
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_user():
    """Factory persisting a catalog User."""

    def _make(**overrides) -> User:
        defaults = {
            "email": "ana@example.com",
            "first_name": "Ana",
            "last_name": "Souza",
            "role": UserRole.CUSTOMER,
        }
        defaults.update(overrides)
        return User.objects.create(**defaults)

    return _make
