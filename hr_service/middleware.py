"""
Middleware components for request handling and logging.

Provides middleware for request correlation, timing and access logging,
and Prometheus request metrics.
"""

import time
import uuid
from typing import Any, Callable, Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .logging_config import get_logger

DEFAULT_CORRELATION_HEADER = "X-Correlation-ID"
UNMATCHED_ENDPOINT = "unmatched"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware assigning a correlation identifier to every request.

    The identifier is taken from the correlation header when the client
    sends one, otherwise generated. It is stored on
    ``request.state.correlation_id``, bound into structlog contextvars for
    the duration of the request and echoed in the response header.
    """

    def __init__(
        self,
        app: ASGIApp,
        logger: Any = None,
        header_name: str = DEFAULT_CORRELATION_HEADER,
    ) -> None:
        """
        Initialize correlation middleware.

        Args:
            app: ASGI application instance
            logger: structlog logger (defaults to the module logger)
            header_name: Request/response header carrying the identifier
        """
        super().__init__(app)
        self.logger = logger if logger is not None else get_logger(__name__)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
        try:
            self.logger.info("Request received", correlation_id=correlation_id)
            response = await call_next(request)
            response.headers[self.header_name] = correlation_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()


class TimingMiddleware(BaseHTTPMiddleware):
    """Middleware logging how long each request took to serve."""

    def __init__(self, app: ASGIApp, logger: Any = None) -> None:
        super().__init__(app)
        self.logger = logger if logger is not None else get_logger(__name__)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            self.logger.info(
                "Request timed",
                method=request.method,
                path=request.url.path,
                work_time=time.perf_counter() - start_time,
            )


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    Middleware writing one access-log event per request.

    Records method, host, path, client address, user agent and the
    response status code.
    """

    def __init__(self, app: ASGIApp, logger: Any = None) -> None:
        super().__init__(app)
        self.logger = logger if logger is not None else get_logger(__name__)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        status_code: Optional[int] = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self.logger.info(
                "Request served",
                method=request.method,
                host=request.headers.get("host"),
                path=request.url.path,
                remote_addr=request.client.host if request.client else None,
                user_agent=request.headers.get("user-agent"),
                status_code=status_code,
            )


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware to track Prometheus metrics for all HTTP requests.

    Tracks:
    - Request count by method, endpoint, and status code
    - Request duration by method and endpoint

    The endpoint label is the matched route template (for example
    ``/api/v1/positions/{position_id}``), or ``"unmatched"`` when no route
    matched, so label cardinality stays bounded by the route table.
    """

    def __init__(self, app: ASGIApp, track_func: Callable) -> None:
        """
        Initialize the middleware.

        Args:
            app: ASGI application instance
            track_func: Called with (method, endpoint, status_code, duration)
        """
        super().__init__(app)
        self.track_func = track_func

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        response = await call_next(request)

        # The router stores the matched route in the shared scope.
        route = request.scope.get("route")
        endpoint = getattr(route, "path", None) or UNMATCHED_ENDPOINT

        self.track_func(
            method=request.method,
            endpoint=endpoint,
            status_code=response.status_code,
            duration=time.time() - start_time,
        )

        return response
