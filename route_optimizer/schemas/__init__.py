"""API schemas for request/response models."""

from .airport_schemas import AirportsResponse, RoutesResponse
from .optimize_schemas import OptimizeRouteRequest, OptimizeRouteResponse, RouteSummary
from .status_schemas import HealthResponse, PingResponse

__all__ = [
    "AirportsResponse",
    "RoutesResponse",
    "OptimizeRouteRequest",
    "OptimizeRouteResponse",
    "RouteSummary",
    "HealthResponse",
    "PingResponse",
]
