"""Services package."""

from .route_service import RouteService
from .singleton import get_route_service, set_route_service

__all__ = ["RouteService", "get_route_service", "set_route_service"]
