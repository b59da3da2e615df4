"""Flight route optimizer: airport graph construction and shortest-path queries."""

from .engine import RouteGraphEngine
from .geo import great_circle_distance, derive_edge_metrics, build_route
from .models import Airport, Route, Metric, OptimizationResult
from .validator import AirportValidationError, DuplicateAirportCodeError

__all__ = [
    "RouteGraphEngine",
    "great_circle_distance",
    "derive_edge_metrics",
    "build_route",
    "Airport",
    "Route",
    "Metric",
    "OptimizationResult",
    "AirportValidationError",
    "DuplicateAirportCodeError",
]
