"""Error translation between the storage/input boundary and the service layer.

Storage failures (Django ``DatabaseError`` family and ``ObjectDoesNotExist``)
are mapped onto the closed application taxonomy:

=====================================  ======================
Storage failure                        Application error
=====================================  ======================
foreign-key violation                  ``InvalidReference``
check-constraint violation             ``DomainRuleViolation``
unique-constraint violation            ``Conflict``
no matching row (``DoesNotExist``)     ``NotFound``
anything else                          ``InternalError``
=====================================  ======================

Pydantic input failures become ``ValidationFailed`` carrying every failing
field, in declaration order.
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import StrEnum
from typing import Any, Iterator, Mapping, Type, TypeVar

import structlog
from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError, IntegrityError
from pydantic import BaseModel as PydanticModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import (
    ApplicationError,
    Conflict,
    DomainRuleViolation,
    ErrorKind,
    InternalError,
    InvalidReference,
    NotFound,
    ValidationFailed,
)

logger = structlog.get_logger(__name__)

DTO = TypeVar("DTO", bound=PydanticModel)


class StorageFailure(StrEnum):
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNIQUE = "unique"
    NOT_FOUND = "not_found"
    OTHER = "other"


# PostgreSQL SQLSTATE codes (psycopg exposes ``sqlstate``, psycopg2 ``pgcode``).
_SQLSTATES = {
    "23503": StorageFailure.FOREIGN_KEY,
    "23514": StorageFailure.CHECK,
    "23505": StorageFailure.UNIQUE,
}

# MySQL / MariaDB server error numbers (first positional arg of the driver error).
_MYSQL_ERRNOS = {
    1216: StorageFailure.FOREIGN_KEY,
    1217: StorageFailure.FOREIGN_KEY,
    1451: StorageFailure.FOREIGN_KEY,
    1452: StorageFailure.FOREIGN_KEY,
    3819: StorageFailure.CHECK,
    1062: StorageFailure.UNIQUE,
}

# SQLite only reports a message; order matters.
_MESSAGE_MARKERS = (
    ("foreign key", StorageFailure.FOREIGN_KEY),
    ("check constraint", StorageFailure.CHECK),
    ("unique", StorageFailure.UNIQUE),
    ("duplicate", StorageFailure.UNIQUE),
)


# ---------------------------------------------------------------------------
# Storage failures
# ---------------------------------------------------------------------------


def classify_storage_error(exc: BaseException) -> StorageFailure:
    """Identify which kind of storage failure ``exc`` represents."""
    if isinstance(exc, ObjectDoesNotExist):
        return StorageFailure.NOT_FOUND
    if not isinstance(exc, IntegrityError):
        return StorageFailure.OTHER

    cause = exc.__cause__ or exc
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate in _SQLSTATES:
        return _SQLSTATES[sqlstate]

    args = getattr(cause, "args", ())
    if args and isinstance(args[0], int) and args[0] in _MYSQL_ERRNOS:
        return _MYSQL_ERRNOS[args[0]]

    message = str(exc).lower()
    for marker, failure in _MESSAGE_MARKERS:
        if marker in message:
            return failure
    return StorageFailure.OTHER


def translate_storage_error(
    exc: BaseException,
    *,
    not_found: Type[NotFound] = NotFound,
    conflict: Type[Conflict] = Conflict,
    invalid_reference: Type[InvalidReference] = InvalidReference,
) -> ApplicationError:
    """Map a storage failure onto an application error.

    The keyword arguments let a service substitute its own subclasses
    (e.g. ``ProductNotFound``) without changing the mapping itself.
    """
    failure = classify_storage_error(exc)
    if failure is StorageFailure.FOREIGN_KEY:
        return invalid_reference()
    if failure is StorageFailure.CHECK:
        return DomainRuleViolation()
    if failure is StorageFailure.UNIQUE:
        return conflict()
    if failure is StorageFailure.NOT_FOUND:
        return not_found()
    return InternalError()


@contextmanager
def storage_errors(
    *,
    not_found: Type[NotFound] = NotFound,
    conflict: Type[Conflict] = Conflict,
    invalid_reference: Type[InvalidReference] = InvalidReference,
) -> Iterator[None]:
    """Translate storage failures raised inside the block.

    Usage::

        with storage_errors(not_found=ProductNotFound):
            self._repo.delete(id)

    Application errors raised inside the block pass through untouched.
    """
    try:
        yield
    except (DatabaseError, ObjectDoesNotExist) as exc:
        error = translate_storage_error(
            exc,
            not_found=not_found,
            conflict=conflict,
            invalid_reference=invalid_reference,
        )
        log = logger.bind(
            kind=str(error.kind),
            failure=str(classify_storage_error(exc)),
            error_type=type(exc).__name__,
        )
        if error.kind is ErrorKind.INTERNAL:
            log.error("storage_error.translated", detail=str(exc), exc_info=exc)
        else:
            log.warning("storage_error.translated", detail=str(exc))
        raise error from exc


# ---------------------------------------------------------------------------
# Input failures
# ---------------------------------------------------------------------------


def _error_message(error: Mapping[str, Any]) -> str:
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error["msg"])


def translate_validation_error(exc: PydanticValidationError) -> ValidationFailed:
    """Convert a Pydantic ``ValidationError`` into ``ValidationFailed``."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]) or None,
            "message": _error_message(error),
        }
        for error in exc.errors()
    ]
    first = errors[0]
    return ValidationFailed(first["message"], field=first["field"], errors=errors)


def parse_input(dto_class: Type[DTO], data: Any) -> DTO:
    """Build ``dto_class`` from raw request data or raise ``ValidationFailed``."""
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValidationFailed("Request body must be a JSON object.")
    try:
        return dto_class.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise translate_validation_error(exc) from exc
