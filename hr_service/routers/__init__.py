"""
API routers for the HR service.
"""

from . import employees_router, health_router, positions_router

__all__ = ["employees_router", "health_router", "positions_router"]
