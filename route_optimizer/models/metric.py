"""Optimization metric (edge-weight selector)."""

from enum import Enum
from typing import Callable, Dict, Union
from .route import Route


class Metric(str, Enum):
    """Edge-weight interpretation used by a shortest-path query."""

    COST = "cost"
    DISTANCE = "distance"
    TIME = "time"

    def weight(self, route: Route) -> float:
        """Return the weight of a route under this metric."""
        return WEIGHT_SELECTORS[self](route)

    @classmethod
    def parse(cls, value: Union[str, "Metric"]) -> "Metric":
        """
        Convert a metric name to a Metric.

        Args:
            value: Metric instance or case-insensitive name

        Returns:
            Matching Metric

        Raises:
            ValueError: If the name is not a known metric
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown metric '{value}' (expected one of: {valid})") from None


WEIGHT_SELECTORS: Dict[Metric, Callable[[Route], float]] = {
    Metric.COST: lambda route: route.total_cost,
    Metric.DISTANCE: lambda route: route.distance,
    Metric.TIME: lambda route: route.flight_time,
}
