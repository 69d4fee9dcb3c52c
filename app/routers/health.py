# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# One endpoint for load balancers: reports whether the session backend
# (the only external dependency) is reachable.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app import __version__

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    sessions: str
    version: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Report service health.

    `status` is "healthy" when the session backend answers a ping and
    "degraded" otherwise.
    """
    backend = request.app.state.session_backend
    reachable = await backend.ping()

    return HealthResponse(
        status="healthy" if reachable else "degraded",
        sessions=f"{'ok' if reachable else 'unreachable'} ({backend.name})",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
