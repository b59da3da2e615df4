"""Route optimizer models package."""

from .airport import Airport
from .route import Route
from .metric import Metric, WEIGHT_SELECTORS
from .result import OptimizationResult

__all__ = [
    "Airport",
    "Route",
    "Metric",
    "WEIGHT_SELECTORS",
    "OptimizationResult",
]
