"""Application error taxonomy.

Every service operation fails with exactly one of four kinds:

- ``ValidationFailed``: malformed or rule-violating input, including
  references to entities that do not exist.
- ``NotFound``: the operation targeted an entity that does not exist.
- ``Conflict``: a uniqueness rule was violated.
- ``InternalError``: unexpected storage or infrastructure failure.

Modules subclass these (``ProductNotFound``, ``UserAlreadyExists``...) so
callers can be as specific as they like while the API layer only needs the
kind to pick a status code.  Raw storage details never travel inside these
exceptions; they are chained via ``raise ... from`` for logging only.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar, Dict, List, Optional


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class ApplicationError(Exception):
    """Base class for all errors surfaced by the service layer.

    ``field`` names the offending input field when there is one.
    ``errors`` lists every ``{"field", "message"}`` pair when more than one
    field failed; the first entry always matches ``field``/``message``.
    """

    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str] = "Application error."
    default_code: ClassVar[str] = "error"
    default_field: ClassVar[Optional[str]] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        field: Optional[str] = None,
        code: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.field = field or self.default_field
        self.code = code or self.default_code
        self.errors = errors or [{"field": self.field, "message": self.message}]
        super().__init__(self.message)


class ValidationFailed(ApplicationError):
    """Input is malformed or violates a domain rule."""

    kind = ErrorKind.VALIDATION
    default_message = "Invalid input."
    default_code = "invalid"


class NotFound(ApplicationError):
    """The targeted entity does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found."
    default_code = "not_found"


class Conflict(ApplicationError):
    """A uniqueness rule would be violated."""

    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists."
    default_code = "conflict"


class InternalError(ApplicationError):
    """Unexpected storage or infrastructure failure.

    The message is opaque; details are logged, not returned.
    """

    kind = ErrorKind.INTERNAL
    default_message = "An internal error occurred."
    default_code = "internal"


class InvalidReference(ValidationFailed):
    """Input references an entity that does not exist."""

    default_message = "Referenced entity does not exist."
    default_code = "invalid_reference"


class DomainRuleViolation(ValidationFailed):
    """Storage rejected a value through one of its check constraints."""

    default_message = "Value violates a domain rule."
    default_code = "domain_rule"
