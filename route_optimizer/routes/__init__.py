"""Routes package for API endpoints."""

from .airport_routes import router as airport_router
from .optimize_routes import router as optimize_router
from .status_routes import router as status_router

__all__ = ["airport_router", "optimize_router", "status_router"]
