"""Tests for data loader module."""

import pytest
from route_optimizer.data_loader import (
    SAMPLE_AIRPORTS,
    load_airports,
    load_sample_airports,
    load_configured_airports,
)
from route_optimizer.config import Config


def test_load_sample_airports():
    airports = load_sample_airports()

    assert len(airports) == len(SAMPLE_AIRPORTS)
    assert [a.code for a in airports][:3] == ["JFK", "LAX", "ORD"]
    assert airports[0].fees == 250


def test_load_airports_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_airports(str(tmp_path / "missing.csv"))


def test_load_airports_empty_file(tmp_path):
    """Test loading airports with header only."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code,name,lat,lng\n")

    airports = load_airports(str(csv_path), Config())

    assert airports == []


def test_load_airports_missing_column(tmp_path):
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code,name,lat\nJFK,Kennedy,40.6\n")

    with pytest.raises(ValueError, match="lng"):
        load_airports(str(csv_path), Config())


def test_load_airports_with_data(tmp_path):
    """Test loading airports with sample data."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text(
        "code,name,city,lat,lng,fees\n"
        "JFK,John F. Kennedy International,New York,40.6413,-73.7781,250\n"
        "lax,Los Angeles International,Los Angeles,33.9425,-118.4081,280\n"
    )

    airports = load_airports(str(csv_path), Config())

    assert [a.code for a in airports] == ["JFK", "LAX"]
    assert airports[0].city == "New York"
    assert airports[1].lng == -118.4081
    assert airports[1].fees == 280.0


def test_load_airports_optional_columns_default(tmp_path):
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code,lat,lng\nORD,41.9742,-87.9073\n")

    airports = load_airports(str(csv_path), Config())

    assert airports[0].name == "ORD"
    assert airports[0].city == ""
    assert airports[0].fees == 0.0


def test_load_airports_skips_bad_rows(tmp_path):
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text(
        "code,name,lat,lng,fees\n"
        "JFK,Kennedy,40.6413,-73.7781,250\n"
        "BAD,Broken,not-a-number,-73.0,10\n"
        "NEG,Negative fee,10.0,10.0,-5\n"
        "ORD,O'Hare,41.9742,,220\n"
    )

    airports = load_airports(str(csv_path), Config())

    # Negative fees load and are rejected when the graph is built
    assert [a.code for a in airports] == ["JFK", "NEG"]
    assert airports[1].fees == -5.0


def test_load_airports_keeps_duplicates(tmp_path):
    """Duplicates are left for the graph build to reject."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text(
        "code,lat,lng\n"
        "JFK,40.6413,-73.7781\n"
        "JFK,40.0,-73.0\n"
    )

    airports = load_airports(str(csv_path), Config())

    assert len(airports) == 2


def test_load_airports_custom_separator(tmp_path):
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code;lat;lng\nDEN;39.8561;-104.6737\n")

    config = Config(CSV_SEPARATOR=";")
    airports = load_airports(str(csv_path), config)

    assert airports[0].code == "DEN"


def test_load_configured_airports(tmp_path):
    assert len(load_configured_airports(Config(AIRPORTS_CSV=None))) == len(SAMPLE_AIRPORTS)

    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code,lat,lng\nSEA,47.4502,-122.3088\n")
    airports = load_configured_airports(Config(AIRPORTS_CSV=str(csv_path)))
    assert [a.code for a in airports] == ["SEA"]
