"""Geographic cost model: great-circle distance and derived route metrics."""

import math
from typing import NamedTuple
from .models.airport import Airport
from .models.route import Route
from .config import (
    EARTH_RADIUS_MILES,
    FUEL_COST_PER_MILE,
    CRUISE_SPEED_MPH,
    DISTANCE_DECIMALS,
    COST_DECIMALS,
    FLIGHT_TIME_DECIMALS,
)


class EdgeMetrics(NamedTuple):
    """Full-precision metrics for a directed edge."""

    distance: float
    fuel_cost: float
    total_cost: float
    flight_time: float


def great_circle_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Calculate the great circle distance between two points
    on the earth (specified in decimal degrees) using the haversine formula.

    Args:
        lat1: Latitude of the first point
        lng1: Longitude of the first point
        lat2: Latitude of the second point
        lng2: Longitude of the second point

    Returns:
        Distance in miles
    """
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)
    a = math.sin(dlat / 2) * math.sin(dlat / 2) + \
        math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * \
        math.sin(dlng / 2) * math.sin(dlng / 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def derive_edge_metrics(
    origin: Airport,
    destination: Airport,
    fuel_cost_per_mile: float = FUEL_COST_PER_MILE,
    cruise_speed_mph: float = CRUISE_SPEED_MPH,
) -> EdgeMetrics:
    """
    Derive distance, cost and flight time for a directed edge.

    Args:
        origin: Departure airport
        destination: Arrival airport
        fuel_cost_per_mile: Fuel cost per mile flown
        cruise_speed_mph: Average cruise speed

    Returns:
        EdgeMetrics with unrounded values
    """
    distance = great_circle_distance(origin.lat, origin.lng, destination.lat, destination.lng)
    fuel_cost = distance * fuel_cost_per_mile
    # Both endpoint fees are charged on every leg
    total_cost = fuel_cost + origin.fees + destination.fees
    flight_time = distance / cruise_speed_mph

    return EdgeMetrics(
        distance=distance,
        fuel_cost=fuel_cost,
        total_cost=total_cost,
        flight_time=flight_time,
    )


def build_route(origin: Airport, destination: Airport) -> Route:
    """
    Create the Route between two airports with display rounding applied.

    Args:
        origin: Departure airport
        destination: Arrival airport

    Returns:
        Route with rounded distance, costs and flight time
    """
    metrics = derive_edge_metrics(origin, destination)
    return Route(
        id=f"{origin.code}-{destination.code}",
        origin=origin.code,
        destination=destination.code,
        distance=int(round(metrics.distance, DISTANCE_DECIMALS)),
        fuel_cost=int(round(metrics.fuel_cost, COST_DECIMALS)),
        total_cost=int(round(metrics.total_cost, COST_DECIMALS)),
        flight_time=round(metrics.flight_time, FLIGHT_TIME_DECIMALS),
    )
