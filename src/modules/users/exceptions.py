"""User domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict


class UserAlreadyExists(Conflict):
    """A user with the same email already exists."""

    default_message = "Email already registered."
    default_field = "email"
