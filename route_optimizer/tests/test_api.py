"""Tests for the HTTP API."""

import json
import pytest
from fastapi.testclient import TestClient
from route_optimizer.main import app
from route_optimizer.config import Config
from route_optimizer.data_loader import load_sample_airports
from route_optimizer.services.route_service import RouteService
from route_optimizer.services.singleton import set_route_service


@pytest.fixture
def client():
    set_route_service(RouteService(config=Config(), airports=load_sample_airports()))
    yield TestClient(app)
    set_route_service(None)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_connection_check(client):
    response = client.get("/api/test")
    assert response.status_code == 200
    assert response.json()["status"] == "success"


def test_health(client):
    response = client.get("/api/health")
    data = response.json()

    assert response.status_code == 200
    assert data["status"] == "healthy"
    assert data["airports"] == 8
    assert data["routes"] == 56


def test_list_airports(client):
    response = client.get("/api/airports")
    airports = response.json()["airports"]

    assert response.status_code == 200
    assert [a["code"] for a in airports][:3] == ["JFK", "LAX", "ORD"]
    assert airports[0]["fees"] == 250


def test_list_routes_by_origin(client):
    response = client.get("/api/routes", params={"origin": "jfk"})
    data = response.json()

    assert data["count"] == 7
    assert all(route["origin"] == "JFK" for route in data["routes"])


def test_optimize_route(client):
    response = client.post(
        "/api/optimize-route",
        json={"origin": "JFK", "destination": "LAX", "metric": "distance"},
    )
    data = response.json()

    assert response.status_code == 200
    assert data["optimized_route"]["metric"] == "distance"
    assert data["optimized_route"]["path"][0]["origin"] == "JFK"
    assert data["optimized_route"]["path"][-1]["destination"] == "LAX"
    assert data["summary"]["distance"].endswith(" miles")
    assert data["summary"]["cost"].startswith("$")
    assert "timestamp" in data


def test_optimize_route_default_metric(client):
    response = client.post("/api/optimize-route", json={"origin": "sea", "destination": "mia"})

    assert response.status_code == 200
    assert response.json()["optimized_route"]["metric"] == "cost"


def test_optimize_route_same_airport(client):
    response = client.post(
        "/api/optimize-route",
        json={"origin": "JFK", "destination": "JFK", "metric": "cost"},
    )
    assert response.status_code == 404


def test_optimize_route_unknown_airport(client):
    response = client.post(
        "/api/optimize-route",
        json={"origin": "ZZZ", "destination": "JFK", "metric": "cost"},
    )
    assert response.status_code == 404


def test_optimize_route_unknown_metric(client):
    response = client.post(
        "/api/optimize-route",
        json={"origin": "JFK", "destination": "LAX", "metric": "comfort"},
    )
    assert response.status_code == 422


def test_query_log_written(tmp_path):
    log_path = tmp_path / "queries.jsonl"
    service = RouteService(
        config=Config(QUERY_LOG_FILE=str(log_path)), airports=load_sample_airports()
    )
    set_route_service(service)
    try:
        TestClient(app).post(
            "/api/optimize-route",
            json={"origin": "JFK", "destination": "ORD", "metric": "time"},
        )
    finally:
        set_route_service(None)

    entries = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert entries[0]["origin"] == "JFK"
    assert entries[0]["found"] is True
