"""DRF exception handler producing a stable error body.

Every error response has the shape::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "field" | null}]
    }

Application errors are mapped by kind: Validation -> 400, NotFound -> 404,
Conflict -> 409, Internal -> 500.  Internal and unexpected exceptions are
logged with full detail and answered with an opaque message.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import ApplicationError, ErrorKind, InternalError
from modules.core.translators import translate_validation_error

logger = structlog.get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_type(status_code: int, kind: Optional[ErrorKind] = None) -> str:
    if kind is ErrorKind.VALIDATION:
        return "validation_error"
    if status_code >= 500:
        return "server_error"
    return "client_error"


def _application_error_response(exc: ApplicationError) -> Response:
    status_code = STATUS_BY_KIND[exc.kind]
    errors = [
        {"code": exc.code, "detail": error["message"], "attr": error["field"]}
        for error in exc.errors
    ]
    return Response(
        {"type": _error_type(status_code, exc.kind), "errors": errors},
        status=status_code,
    )


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Flatten DRF ``ErrorDetail`` structures into a list of errors."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            child = None if key == "non_field_errors" else str(key)
            if attr and child:
                child = f"{attr}.{child}"
            errors.extend(_flatten(value, child or attr))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten(item, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Entry point configured as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``."""
    view = context.get("view")
    log = logger.bind(view=type(view).__name__ if view else None)

    if isinstance(exc, PydanticValidationError):
        exc = translate_validation_error(exc)

    if isinstance(exc, ApplicationError):
        if exc.kind is ErrorKind.INTERNAL:
            log.error("request.internal_error", error=str(exc), exc_info=exc)
        else:
            log.info(
                "request.rejected",
                kind=str(exc.kind),
                code=exc.code,
                field=exc.field,
            )
        return _application_error_response(exc)

    response = exception_handler(exc, context)
    if response is None:
        log.error("request.unhandled_exception", error_type=type(exc).__name__, exc_info=exc)
        return _application_error_response(InternalError())

    error_type = (
        "validation_error"
        if isinstance(exc, exceptions.ValidationError)
        else _error_type(response.status_code)
    )
    response.data = {"type": error_type, "errors": _flatten(exc.detail)}
    return response
