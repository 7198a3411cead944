"""
OrderDesk - Main FastAPI Application.

REST API layer over the order placement and retrieval workflow.
"""
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orderdesk.api.security import warn_if_weak_secret
from orderdesk.api.v1.endpoints import health, orders
from orderdesk.application.results import OrderInternalError
from orderdesk.infrastructure.database import close_database, init_database
from orderdesk.infrastructure.logging import configure_logging
from orderdesk.settings import get_app_settings

settings = get_app_settings()

configure_logging(settings.api.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.api.title,
    description="""
    Order management API.

    Features:
    - Order placement validated against product stock
    - Ownership-scoped order retrieval (admins see everything)
    - Order totals computed from current product prices
    - Order status updates
    """,
    version=settings.api.version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(OrderInternalError)
async def order_internal_error_handler(request: Request, exc: OrderInternalError) -> JSONResponse:
    """Surface store failures as a generic, retryable 500.

    The cause was already logged by the service.
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info("🚀 OrderDesk API starting up...")
    warn_if_weak_secret(settings.auth)
    await init_database()
    logger.info("📚 Swagger UI available at: /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    await close_database()
    logger.info("👋 OrderDesk API shutting down...")


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router)
app.include_router(orders.router, prefix="/api/v1")


@app.get("/", tags=["root"])
async def root():
    """API root endpoint."""
    return {
        "message": settings.api.title,
        "version": settings.api.version,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
