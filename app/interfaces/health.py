"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and whether
the database answers a trivial query.
"""

import logging

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.interfaces.news.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and database reachability.",
)
async def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    database = "ok"
    try:
        async with request.app.state.session_factory() as session:
            await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.warning("Health check could not reach the database", exc_info=True)
        database = "unavailable"
    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        version=settings.version,
        database=database,
    )
