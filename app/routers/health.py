# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides a health check for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.dependencies import SupabaseDep

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    database: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable"}},
)
def health_check(client: SupabaseDep):
    """
    Health check endpoint.

    Runs a one-row query against the users table; answers 503 if the
    database can't be reached.
    """
    try:
        client.table("users").select("id").limit(1).execute()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "disconnected"},
        )

    return HealthResponse(
        status="healthy",
        database="connected",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
