"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer maps them to HTTP responses through their error kind.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidReference, NotFound


class ProductNotFound(NotFound):
    """The requested product does not exist."""

    default_message = "Product not found."


class InvalidCategoryReference(InvalidReference):
    """The product references a category that does not exist.

    This is a validation failure of the product input, not a NotFound:
    the product itself is well-formed, only its reference dangles.
    """

    default_message = "Category does not exist."
    default_field = "category_id"
