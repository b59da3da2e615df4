"""Singleton pattern for shared service instances."""

from typing import Optional
from .route_service import RouteService

# Global service instance (singleton pattern)
_route_service: Optional[RouteService] = None


def get_route_service() -> RouteService:
    """
    Get or create the singleton route service instance.

    Returns:
        RouteService instance
    """
    global _route_service
    if _route_service is None:
        _route_service = RouteService()
    return _route_service


def set_route_service(service: Optional[RouteService]) -> None:
    """Replace the shared instance (None resets it)."""
    global _route_service
    if _route_service is not None and _route_service is not service:
        _route_service.close()
    _route_service = service
