"""Welcome & Health Probes: root greeting plus liveness/readiness endpoints.

Invariants:
    - GET / returns the plain-text welcome line
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

WELCOME_TEXT = "Welcome to backend server of QRCODE"


@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_TEXT


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "qrdesk-api"}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe, including database connectivity."""
    manager = getattr(request.app.state, "db_manager", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
