"""Immutable route graph snapshot."""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
from .models.airport import Airport
from .models.route import Route
from .geo import build_route

logger = logging.getLogger(__name__)


class RouteGraph:
    """Complete directed graph over an airport set, keyed by airport code."""

    def __init__(self, airports: Tuple[Airport, ...], adjacency: Dict[str, Dict[str, Route]]):
        self._airports = airports
        self._by_code = MappingProxyType({airport.code: airport for airport in airports})
        self._adjacency = MappingProxyType(
            {code: MappingProxyType(edges) for code, edges in adjacency.items()}
        )

    @classmethod
    def build(cls, airports: Iterable[Airport]) -> "RouteGraph":
        """
        Build a graph with one route per ordered pair of distinct airports.

        Codes must already be unique.

        Args:
            airports: Airport set

        Returns:
            New RouteGraph
        """
        airports = tuple(airports)
        adjacency: Dict[str, Dict[str, Route]] = {}

        for origin in airports:
            edges = {}
            for destination in airports:
                if origin.code == destination.code:
                    continue
                edges[destination.code] = build_route(origin, destination)
            adjacency[origin.code] = edges

        graph = cls(airports, adjacency)
        logger.debug(f"Built route graph: {len(airports)} airports, {graph.route_count} routes")
        return graph

    @property
    def airports(self) -> Tuple[Airport, ...]:
        return self._airports

    @property
    def codes(self) -> List[str]:
        return [airport.code for airport in self._airports]

    @property
    def route_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def __contains__(self, code: str) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._airports)

    def get_airport(self, code: str) -> Optional[Airport]:
        return self._by_code.get(code)

    def neighbors(self, code: str) -> Mapping[str, Route]:
        """Outgoing routes of an airport, keyed by destination code."""
        return self._adjacency.get(code, MappingProxyType({}))

    def get_route(self, origin: str, destination: str) -> Optional[Route]:
        return self.neighbors(origin).get(destination)

    def routes(self) -> List[Route]:
        """All routes, origin-major in airport input order."""
        return [
            route
            for airport in self._airports
            for route in self._adjacency[airport.code].values()
        ]
