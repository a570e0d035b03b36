import time
from typing import Any, Dict

import structlog
from django.conf import settings
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()


def _check_database(alias: str = "default") -> Dict[str, Any]:
    """Round-trip a trivial query; report latency or ``down``."""
    conn = connections[alias]
    started = time.monotonic()
    try:
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as exc:
        logger.error("health_check.database_down", alias=alias, error=str(exc))
        return {"status": "down", "vendor": conn.vendor}
    return {
        "status": "up",
        "vendor": conn.vendor,
        "response_time_ms": round((time.monotonic() - started) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness plus database reachability: 200 when healthy, 503 otherwise."""
    services = {"database": _check_database()}
    healthy = all(service["status"] == "up" for service in services.values())
    status = "healthy" if healthy else "unhealthy"

    logger.info("health_check.completed", status=status)

    return JsonResponse(
        {
            "status": status,
            "version": settings.SPECTACULAR_SETTINGS["VERSION"],
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
