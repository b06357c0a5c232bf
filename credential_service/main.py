"""
Main FastAPI application entry point for the credential service.

Version: 1.0
"""

# External imports with version specifications
from fastapi import FastAPI, Request  # fastapi v0.110+
from fastapi.responses import PlainTextResponse
import structlog  # structlog v23.1.0
from prometheus_client import Counter, Histogram, CollectorRegistry  # prometheus_client v0.16.0
import time
from typing import Tuple

# Internal imports
from credential_service.api.router import api_router
from credential_service.config.logging_config import configure_logging
from credential_service.config.settings import get_settings
from credential_service.core.constants import ROOT_MESSAGE
from credential_service.db.migrations import run_migrations
from credential_service.db.mongodb import (
    close_mongodb_connection,
    get_database,
    init_mongodb,
)
from credential_service.middleware.error_handler import register_exception_handlers
from credential_service.middleware.logging_middleware import logging_middleware

# Configure structured logging
logger = structlog.get_logger(__name__)

# Initialize metrics registry
metrics_registry = CollectorRegistry()

def setup_metrics() -> Tuple[Counter, Histogram]:
    """Initialize and return Prometheus metrics."""
    request_counter = Counter(
        'http_requests_total',
        'Total HTTP requests',
        ['method', 'endpoint', 'status'],
        registry=metrics_registry
    )

    request_duration = Histogram(
        'http_request_duration_seconds',
        'HTTP request duration in seconds',
        ['method', 'endpoint'],
        registry=metrics_registry
    )

    return request_counter, request_duration

# Initialize metrics
request_counter, request_duration = setup_metrics()

UNMATCHED_ROUTE = "unmatched"

def route_label(request: Request) -> str:
    """Matched route template, or ``unmatched`` when no route handled the request."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)

def create_application() -> FastAPI:
    """
    Creates and configures the FastAPI application.
    """
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Registers users and issues signed, time-limited tokens",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        redirect_slashes=False
    )

    # Innermost first: the fallback error middleware must sit inside the loggers
    register_exception_handlers(app)
    app.middleware("http")(logging_middleware)

    @app.middleware("http")
    async def monitor_requests(request: Request, call_next):
        """Middleware for monitoring API requests with metrics collection."""
        start_time = time.time()
        response = await call_next(request)

        duration = time.time() - start_time
        endpoint = route_label(request)
        request_counter.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code
        ).inc()

        request_duration.labels(
            method=request.method,
            endpoint=endpoint
        ).observe(duration)

        return response

    @app.on_event("startup")
    async def startup_event():
        """Connect to MongoDB and apply migrations; refuse to start otherwise."""
        mongodb = settings.get_mongodb_settings()
        if not await init_mongodb(mongodb["url"], mongodb["db_name"]):
            logger.error("Failed to initialize MongoDB")
            raise RuntimeError("Database initialization failed")
        logger.info("MongoDB initialized successfully")

        if not await run_migrations(await get_database()):
            raise RuntimeError("Database migrations failed")

        if settings.get_signing_secret() is None:
            logger.warning("JWT_SECRET is not configured; token issuance will fail")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup services on application shutdown."""
        await close_mongodb_connection()
        logger.info("Cleaned up database connections")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return ROOT_MESSAGE

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app

# Create FastAPI application instance
app = create_application()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "credential_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )
