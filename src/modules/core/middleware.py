import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied ids are echoed into logs and headers.
_VALID_REQUEST_ID = re.compile(r"^[\w.:-]{1,128}$")

logger = structlog.get_logger()


def _request_id(request: HttpRequest) -> str:
    supplied = request.META.get("HTTP_X_REQUEST_ID", "")
    if _VALID_REQUEST_ID.match(supplied):
        return supplied
    return str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID.

    Reuses the client's ``X-Request-ID`` when it looks sane, otherwise
    generates a UUID4. The ID, method and path are bound into structlog's
    context variables for the duration of the request, so service and
    repository events carry them too. The ID is echoed back in the
    response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _request_id(request)
        structlog.contextvars.clear_contextvars()

        with structlog.contextvars.bound_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        ):
            logger.info("request_started", query=request.META.get("QUERY_STRING", ""))
            start = time.monotonic()

            response = self.get_response(request)

            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "request_finished",
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - start) * 1000, 2),
            )

        response[REQUEST_ID_HEADER] = cid
        return response
