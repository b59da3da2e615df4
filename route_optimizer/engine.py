"""Route graph engine: graph builds and shortest-path queries."""

import logging
import math
import threading
from typing import Dict, Iterable, List, Optional, Union
from .graph import RouteGraph
from .models.airport import Airport
from .models.metric import Metric
from .models.result import OptimizationResult
from .models.route import Route
from .validator import Validator

logger = logging.getLogger(__name__)


class RouteGraphEngine:
    """
    Owns the current route graph and answers optimization queries.

    build_graph() validates and builds a new immutable RouteGraph outside
    the writer lock, then publishes it by swapping a reference under it.
    optimize_route() reads that reference once and never mutates it, so
    queries can run concurrently with each other and with a rebuild.
    """

    def __init__(self, airports: Optional[Iterable[Airport]] = None, validator: Optional[Validator] = None):
        """
        Initialize the engine.

        Args:
            airports: Optional airport set to build immediately
            validator: Validator used before each build
        """
        self.validator = validator or Validator()
        self._graph: Optional[RouteGraph] = None
        self._build_lock = threading.Lock()

        if airports is not None:
            self.build_graph(airports)

    @property
    def is_built(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> Optional[RouteGraph]:
        return self._graph

    def build_graph(self, airports: Iterable[Airport]) -> None:
        """
        Replace the current graph with one built from a new airport set.

        The whole build is rejected when codes are not unique; the
        previous graph stays in place.

        Args:
            airports: Airport set

        Raises:
            DuplicateAirportCodeError: If two airports share a code
            AirportValidationError: If an airport fails validation
        """
        airports = list(airports)
        self.validator.check_airports(airports)
        graph = RouteGraph.build(airports)

        # Only the publish step is serialized
        with self._build_lock:
            self._graph = graph

        logger.info(f"Route graph built: {len(graph)} airports, {graph.route_count} routes")

    def list_airports(self) -> List[Airport]:
        """Airports of the current graph, in input order."""
        graph = self._graph
        if graph is None:
            return []
        return list(graph.airports)

    def list_routes(self, origin: Optional[str] = None) -> List[Route]:
        """
        Routes of the current graph.

        Args:
            origin: Only return routes leaving this airport

        Returns:
            List of routes (empty if unbuilt or origin unknown)
        """
        graph = self._graph
        if graph is None:
            return []
        if origin is not None:
            return list(graph.neighbors(origin).values())
        return graph.routes()

    def get_airport(self, code: str) -> Optional[Airport]:
        graph = self._graph
        if graph is None:
            return None
        return graph.get_airport(code)

    def optimize_route(
        self,
        origin: str,
        destination: str,
        metric: Union[Metric, str] = Metric.COST,
    ) -> Optional[OptimizationResult]:
        """
        Find the minimum-weight path between two airports.

        Args:
            origin: Origin airport code
            destination: Destination airport code
            metric: Edge weight to minimize (cost, distance or time)

        Returns:
            OptimizationResult, or None if the selection is invalid or the
            destination cannot be reached

        Raises:
            ValueError: If the metric name is unknown
        """
        metric = Metric.parse(metric)
        graph = self._graph

        if graph is None:
            logger.debug("optimize_route called before build_graph")
            return None
        if not origin or not destination or origin == destination:
            return None
        if origin not in graph or destination not in graph:
            logger.debug(f"Unknown airport in selection {origin} -> {destination}")
            return None

        previous = self._shortest_path_tree(graph, origin, destination, metric)
        path = self._reconstruct_path(previous, origin, destination)
        if not path:
            logger.warning(f"No path from {origin} to {destination} ({metric.value})")
            return None

        result = OptimizationResult.from_path(origin, destination, metric, path)
        logger.debug(
            f"Optimized {origin} -> {destination} by {metric.value}: "
            f"{' -> '.join(result.airports)} ({result.stops} stops)"
        )
        return result

    @staticmethod
    def _shortest_path_tree(
        graph: RouteGraph, origin: str, destination: str, metric: Metric
    ) -> Dict[str, Route]:
        """
        Run Dijkstra from origin, stopping once destination is finalized.

        Among unvisited nodes with equal tentative distance, the lowest
        code is taken first. A predecessor is only replaced on a strictly
        shorter distance.

        Returns:
            Mapping of node code to the route used to reach it
        """
        distances = {code: math.inf for code in graph.codes}
        distances[origin] = 0.0
        previous: Dict[str, Route] = {}
        unvisited = set(distances)

        while unvisited:
            current = min(unvisited, key=lambda code: (distances[code], code))
            if math.isinf(distances[current]):
                break

            unvisited.remove(current)
            if current == destination:
                break

            for neighbor, route in graph.neighbors(current).items():
                if neighbor not in unvisited:
                    continue
                alt = distances[current] + metric.weight(route)
                if alt < distances[neighbor]:
                    distances[neighbor] = alt
                    previous[neighbor] = route

        return previous

    @staticmethod
    def _reconstruct_path(previous: Dict[str, Route], origin: str, destination: str) -> List[Route]:
        path = []
        current = destination
        while current != origin:
            route = previous.get(current)
            if route is None:
                return []
            path.append(route)
            current = route.origin
        path.reverse()
        return path
