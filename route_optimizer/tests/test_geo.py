"""Tests for the geographic cost model."""

import pytest
from route_optimizer.geo import great_circle_distance, derive_edge_metrics, build_route
from route_optimizer.models.airport import Airport
from route_optimizer.config import FUEL_COST_PER_MILE, CRUISE_SPEED_MPH, EARTH_RADIUS_MILES


@pytest.fixture
def jfk():
    return Airport(code="JFK", name="John F. Kennedy International", city="New York",
                   lat=40.6413, lng=-73.7781, fees=250)


@pytest.fixture
def lax():
    return Airport(code="LAX", name="Los Angeles International", city="Los Angeles",
                   lat=33.9425, lng=-118.4081, fees=280)


@pytest.mark.parametrize(
    "p, q",
    [
        ((40.6413, -73.7781), (33.9425, -118.4081)),
        ((-33.9399, 151.1753), (51.4700, -0.4543)),
        ((0.0, 179.5), (0.0, -179.5)),
        ((89.9, 0.0), (-89.9, 180.0)),
    ],
)
def test_distance_is_symmetric(p, q):
    """Distance does not depend on direction."""
    forward = great_circle_distance(p[0], p[1], q[0], q[1])
    backward = great_circle_distance(q[0], q[1], p[0], p[1])
    assert forward == pytest.approx(backward, rel=1e-6)


def test_distance_identical_points_is_zero():
    assert great_circle_distance(41.9742, -87.9073, 41.9742, -87.9073) == 0.0


def test_distance_along_equator():
    """One degree of longitude on the equator is R * pi / 180."""
    expected = EARTH_RADIUS_MILES * 3.141592653589793 / 180
    assert great_circle_distance(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected)


def test_distance_across_antimeridian_is_short():
    assert great_circle_distance(0.0, 179.5, 0.0, -179.5) == pytest.approx(
        great_circle_distance(0.0, 0.0, 0.0, 1.0)
    )


def test_jfk_lax_metrics(jfk, lax):
    """Derived metrics for the JFK -> LAX edge."""
    metrics = derive_edge_metrics(jfk, lax)

    assert 2465 <= metrics.distance <= 2480
    assert metrics.fuel_cost == pytest.approx(metrics.distance * FUEL_COST_PER_MILE)
    assert metrics.total_cost == pytest.approx(metrics.fuel_cost + 250 + 280)
    assert metrics.flight_time == pytest.approx(metrics.distance / CRUISE_SPEED_MPH)


def test_build_route_rounding(jfk, lax):
    """Stored fields are rounded from full-precision values."""
    metrics = derive_edge_metrics(jfk, lax)
    route = build_route(jfk, lax)

    assert route.id == "JFK-LAX"
    assert route.origin == "JFK"
    assert route.destination == "LAX"
    assert route.distance == round(metrics.distance)
    assert route.fuel_cost == round(metrics.fuel_cost)
    assert route.total_cost == round(metrics.total_cost)
    assert route.flight_time == round(metrics.flight_time, 1)
    assert abs(route.total_cost - 2510) <= 10
    assert abs(route.flight_time - 4.95) <= 0.1


def test_edge_metrics_are_deterministic(jfk, lax):
    assert derive_edge_metrics(jfk, lax) == derive_edge_metrics(jfk, lax)


def test_costs_use_both_fees(jfk, lax):
    """Fees of both endpoints are charged in either direction."""
    forward = derive_edge_metrics(jfk, lax)
    backward = derive_edge_metrics(lax, jfk)
    assert forward.total_cost - forward.fuel_cost == pytest.approx(530)
    assert backward.total_cost - backward.fuel_cost == pytest.approx(530)


def test_custom_cost_constants(jfk, lax):
    metrics = derive_edge_metrics(jfk, lax, fuel_cost_per_mile=1.0, cruise_speed_mph=250)
    assert metrics.fuel_cost == pytest.approx(metrics.distance)
    assert metrics.flight_time == pytest.approx(metrics.distance / 250)


def test_build_route_rejects_self_loop(jfk):
    with pytest.raises(ValueError):
        build_route(jfk, jfk)
