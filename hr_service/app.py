"""
Main FastAPI application.

This file wires together all layers:
- Domain: HR entities and error taxonomy
- Repositories: Data access
- Services: Business rules
- Routers: HTTP endpoints
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .dependencies import set_hr_service
from .domain.exceptions import ErrorKind, HRServiceException
from .logging_config import get_logger, setup_logging
from .metrics import metrics_endpoint, track_error, track_request_metrics
from .middleware import (
    AccessLogMiddleware,
    CorrelationIdMiddleware,
    PrometheusMiddleware,
    TimingMiddleware,
)
from .repositories.memory_repository import MemoryHRRepository
from .routers import employees_router, health_router, positions_router
from .services.hr_service import HRService

logger = get_logger(__name__)

ERROR_STATUS_CODES = {
    ErrorKind.LOG_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PARSE_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.POSITION_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.POSITION_DOES_NOT_EXIST: 422,
    ErrorKind.EMPLOYEE_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}


def create_hr_service() -> HRService:
    """Create the HR service backed by the in-memory repository."""
    return HRService(repository=MemoryHRRepository(), logger=get_logger("hr_service.service"))


def create_app(service: Optional[HRService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        service: HR service to serve; a fresh in-memory one is created at
            startup when omitted

    Returns:
        Configured FastAPI instance
    """
    setup_logging(settings.LOG_LEVEL, use_json=settings.LOG_JSON)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting HR Service", version=settings.SERVICE_VERSION)

        hr_service = service if service is not None else create_hr_service()
        set_hr_service(hr_service)
        logger.info("HR service initialized")

        yield

        logger.info("Shutting down HR Service")
        set_hr_service(None)

    app = FastAPI(
        title="HR Service",
        description="Positions and employees with uniqueness and referential checks",
        version=settings.SERVICE_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[settings.CORRELATION_HEADER],
    )
    app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(TimingMiddleware)
    # Added last so it runs first and the other middleware log with the id bound.
    app.add_middleware(CorrelationIdMiddleware, header_name=settings.CORRELATION_HEADER)

    app.include_router(positions_router.router)
    app.include_router(employees_router.router)
    app.include_router(health_router.router)

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        """Prometheus metrics endpoint."""
        return await metrics_endpoint()

    @app.exception_handler(HRServiceException)
    async def hr_service_exception_handler(request: Request, exc: HRServiceException):
        """Translate service errors to HTTP responses."""
        status_code = ERROR_STATUS_CODES.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        track_error(exc.kind.value)
        logger.warning(
            "Request failed",
            path=request.url.path,
            method=request.method,
            error=exc.kind.value,
            status_code=status_code,
            details=exc.details,
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "success": False,
                "error": exc.kind.value,
                "message": exc.message,
                "correlation_id": getattr(request.state, "correlation_id", None),
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "internal_server_error",
                "message": "An unexpected error occurred",
                "correlation_id": getattr(request.state, "correlation_id", None),
            },
        )

    return app


app = create_app()
