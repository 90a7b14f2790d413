"""Health check endpoints.

``/health`` is a bare liveness probe. ``/actuator/health`` runs the
database probe and maps a DOWN result to HTTP 503 so that load-balancer
probes can tell the two states apart.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from app.services.health import check_database

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """Return the literal text ``OK`` while the process is serving requests."""
    return "OK"


@router.get("/actuator/health")
async def database_health():
    """Return UP/DOWN with database diagnostic details."""
    report = await check_database()
    return JSONResponse(
        status_code=200 if report.is_up else 503,
        content={"status": report.status, "details": report.details},
    )
