"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the contact service is not wired (readiness)
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from contact_api.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "contact-api",
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — the contact store must be wired."""
    store = getattr(request.app.state, "contact_store", None)
    if store is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"store": "healthy"},
        "contacts": len(store),
    }
