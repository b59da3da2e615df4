"""Service for route optimization requests."""

import logging
import time
from typing import Dict, Iterable, List, Optional
from ..config import Config
from ..data_loader import load_configured_airports
from ..engine import RouteGraphEngine
from ..logger import QueryLogger
from ..models.airport import Airport
from ..models.metric import Metric
from ..models.route import Route
from ..models.result import OptimizationResult
from ..utils import format_cost, format_distance, format_duration

logger = logging.getLogger(__name__)


class RouteService:
    """Service wrapping a RouteGraphEngine for the HTTP layer."""

    def __init__(self, config: Optional[Config] = None, airports: Optional[Iterable[Airport]] = None):
        """
        Initialize route service.

        Args:
            config: Configuration object
            airports: Airport set; loaded from configuration when omitted
        """
        self.config = config or Config()
        self.started_at = time.time()
        self.engine = RouteGraphEngine()
        self.query_logger: Optional[QueryLogger] = None

        if airports is None:
            airports = load_configured_airports(self.config)
        self.engine.build_graph(airports)

        # Opened only once the graph is built
        if self.config.QUERY_LOG_FILE:
            self.query_logger = QueryLogger(self.config.QUERY_LOG_FILE)

    def get_airports(self) -> List[Airport]:
        return self.engine.list_airports()

    def get_routes(self, origin: Optional[str] = None) -> List[Route]:
        return self.engine.list_routes(origin)

    def optimize(self, origin: str, destination: str, metric: str) -> Optional[Dict]:
        """
        Optimize a route and build the response payload.

        Args:
            origin: Origin airport code
            destination: Destination airport code
            metric: Metric name

        Returns:
            Payload dictionary, or None when there is no result

        Raises:
            ValueError: If the metric name is unknown
        """
        metric = Metric.parse(metric)
        origin = origin.strip().upper()
        destination = destination.strip().upper()

        result = self.engine.optimize_route(origin, destination, metric)

        if self.query_logger is not None:
            self.query_logger.log_query(origin, destination, metric.value, result)

        if result is None:
            return None

        logger.info(
            f"Optimized {origin} -> {destination} by {metric.value}: "
            f"{result.stops} stop(s), {format_cost(result.total_cost)}"
        )
        return {
            "optimized_route": result,
            "summary": self.summarize(result),
        }

    @staticmethod
    def summarize(result: OptimizationResult) -> Dict:
        """Human-readable totals for an optimization result."""
        return {
            "route": " -> ".join(result.airports),
            "distance": format_distance(result.total_distance),
            "duration": format_duration(result.total_time),
            "cost": format_cost(result.total_cost),
            "stops": result.airports[1:-1],
        }

    def get_health(self) -> Dict:
        return {
            "status": "healthy",
            "uptime_seconds": round(time.time() - self.started_at, 3),
            "airports": len(self.engine.list_airports()),
            "routes": len(self.engine.list_routes()),
        }

    def close(self) -> None:
        if self.query_logger is not None:
            self.query_logger.close()
            self.query_logger = None
