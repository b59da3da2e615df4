"""Optimization result model."""

from typing import List
from pydantic import BaseModel
from .metric import Metric
from .route import Route


class OptimizationResult(BaseModel):
    """Ordered path from origin to destination with aggregate totals."""

    origin: str
    destination: str
    metric: Metric
    path: List[Route]
    total_distance: int
    total_cost: int
    total_time: float
    stops: int

    @classmethod
    def from_path(
        cls, origin: str, destination: str, metric: Metric, path: List[Route]
    ) -> "OptimizationResult":
        """
        Build a result by summing segment values over a path.

        Args:
            origin: Origin airport code
            destination: Destination airport code
            metric: Metric used for the query
            path: Ordered, non-empty list of routes

        Returns:
            OptimizationResult with totals computed from the path
        """
        total_time = sum(route.flight_time for route in path)
        return cls(
            origin=origin,
            destination=destination,
            metric=metric,
            path=list(path),
            total_distance=sum(route.distance for route in path),
            total_cost=sum(route.total_cost for route in path),
            total_time=round(total_time, 1),
            stops=len(path) - 1,
        )

    @property
    def airports(self) -> List[str]:
        """Airport codes visited, in order."""
        if not self.path:
            return []
        return [self.path[0].origin] + [route.destination for route in self.path]

    def total_weight(self) -> float:
        """Total weight of the path under the query metric."""
        return sum(self.metric.weight(route) for route in self.path)
