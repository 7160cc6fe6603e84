"""Health check for load balancers and container probes."""
from __future__ import annotations

import logging
import platform
import sys
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from wordzee import __version__

try:  # POSIX only
    import resource
except ImportError:  # pragma: no cover - windows
    resource = None

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE_NAME = "Wordzee API"
MEMORY_WARNING_PERCENT = 90
# ru_maxrss is bytes on macOS, kilobytes elsewhere
RSS_IN_BYTES = sys.platform == "darwin"


def _database_check(request: Request) -> dict:
    svc = getattr(request.app.state, "word_service", None)
    if svc is None:
        return {"status": "error", "message": "WordService not configured"}
    try:
        total = svc.count()
    except Exception as exc:
        logger.warning("Health check: word store unavailable (%s)", exc)
        return {"status": "error", "message": "Word store unavailable"}
    return {"status": "ok", "message": "Word store accessible", "words": total}


def _memory_check() -> dict:
    if resource is None:
        return {"status": "ok", "usage": "unknown"}
    usage = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    usage_bytes = usage if RSS_IN_BYTES else usage * 1024
    check = {"status": "ok", "usage": f"{usage_bytes / 1024 / 1024:.2f} MB"}
    soft_limit, _ = resource.getrlimit(resource.RLIMIT_AS)
    if soft_limit not in (resource.RLIM_INFINITY, -1) and soft_limit > 0:
        percent = usage_bytes / soft_limit * 100
        check["limit"] = f"{soft_limit / 1024 / 1024:.2f} MB"
        check["percent"] = f"{percent:.2f}%"
        if percent >= MEMORY_WARNING_PERCENT:
            check["status"] = "warning"
    return check


@router.get("/health")
def health(request: Request):
    started = time.perf_counter()
    checks = {
        "database": _database_check(request),
        "memory": _memory_check(),
        "python": {
            "status": "ok",
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
        },
    }
    status = "healthy"
    if checks["database"]["status"] != "ok":
        status = "unhealthy"
    elif checks["memory"]["status"] != "ok":
        status = "degraded"

    payload = {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "version": __version__,
        "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
        "checks": checks,
    }
    return JSONResponse(payload, status_code=200 if status == "healthy" else 503)
