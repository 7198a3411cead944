"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
import platform
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orderdesk.api.deps import get_session_factory
from orderdesk.infrastructure.database import check_database
from orderdesk.settings import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns process health status.
    """
    settings = get_app_settings().api
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "orderdesk",
        "version": settings.version,
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """
    Readiness check endpoint.

    Returns 200 only when the database answers.
    """
    database_ok = await check_database(session_factory.kw["bind"])
    body = {
        "status": "ready" if database_ok else "not_ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "api": "ok",
            "database": "ok" if database_ok else "error",
        },
    }
    return JSONResponse(status_code=200 if database_ok else 503, content=body)
