"""Category domain exceptions.

Raised by the Service Layer; the API layer maps them to HTTP responses
through their error kind.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class CategoryNotFound(NotFound):
    """The requested category does not exist."""

    default_message = "Category not found."
