"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from fastapi import Request

from .services.correlation import CORRELATION_ID_KEY

if TYPE_CHECKING:
    from .services.hr_service import HRService

# Global service instance (set by main app)
_hr_service: Optional["HRService"] = None


def set_hr_service(service: Optional["HRService"]) -> None:
    """
    Set the global HR service instance.

    Called by main app during startup.
    """
    global _hr_service
    _hr_service = service


async def get_hr_service() -> "HRService":
    """
    Get HR service instance for dependency injection.

    Used by all routers that need the HR service.
    """
    if _hr_service is None:
        raise RuntimeError("HR service not initialized")
    return _hr_service


async def get_request_context(request: Request) -> Dict[str, Any]:
    """
    Build the service call context for a request.

    The correlation identifier is the one assigned by
    ``CorrelationIdMiddleware``; without the middleware the context is
    empty and every service call fails its correlation check.
    """
    ctx: Dict[str, Any] = {}
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id is not None:
        ctx[CORRELATION_ID_KEY] = correlation_id
    return ctx
