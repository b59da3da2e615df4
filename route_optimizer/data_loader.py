"""Data loader module for airport sets."""

import logging
import os
import pandas as pd
from typing import List, Optional

from .models.airport import Airport
from .config import Config, AIRPORT_REQUIRED_COLUMNS, AIRPORT_OPTIONAL_COLUMNS

logger = logging.getLogger(__name__)


# Sample airports with realistic coordinates and fees
SAMPLE_AIRPORTS = [
    {
        "code": "JFK",
        "name": "John F. Kennedy International",
        "city": "New York",
        "lat": 40.6413,
        "lng": -73.7781,
        "fees": 250,
    },
    {
        "code": "LAX",
        "name": "Los Angeles International",
        "city": "Los Angeles",
        "lat": 33.9425,
        "lng": -118.4081,
        "fees": 280,
    },
    {
        "code": "ORD",
        "name": "Chicago O'Hare International",
        "city": "Chicago",
        "lat": 41.9742,
        "lng": -87.9073,
        "fees": 220,
    },
    {
        "code": "MIA",
        "name": "Miami International",
        "city": "Miami",
        "lat": 25.7959,
        "lng": -80.287,
        "fees": 200,
    },
    {
        "code": "DFW",
        "name": "Dallas/Fort Worth International",
        "city": "Dallas",
        "lat": 32.8975,
        "lng": -97.038,
        "fees": 190,
    },
    {
        "code": "SEA",
        "name": "Seattle-Tacoma International",
        "city": "Seattle",
        "lat": 47.4502,
        "lng": -122.3088,
        "fees": 260,
    },
    {
        "code": "ATL",
        "name": "Hartsfield-Jackson Atlanta International",
        "city": "Atlanta",
        "lat": 33.6407,
        "lng": -84.4277,
        "fees": 180,
    },
    {
        "code": "DEN",
        "name": "Denver International",
        "city": "Denver",
        "lat": 39.8561,
        "lng": -104.6737,
        "fees": 210,
    },
]


def load_sample_airports() -> List[Airport]:
    """Return the built-in sample airport set."""
    return [Airport(**record) for record in SAMPLE_AIRPORTS]


def load_airports(csv_path: str, config: Optional[Config] = None) -> List[Airport]:
    """
    Parse an airport CSV file and produce Airport instances.

    Required columns are code, lat and lng; name, city and fees are
    optional. Rows that cannot be parsed are skipped with a warning.
    Duplicate codes are kept so that the graph build can reject them.

    Args:
        csv_path: Path to airports CSV file
        config: Configuration object (separator)

    Returns:
        List of airports in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a required column is missing
    """
    config = config or Config()

    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Airports CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, sep=config.CSV_SEPARATOR, dtype={"code": str})
    df.columns = [str(col).strip().lower() for col in df.columns]
    logger.info(f"Loaded airports CSV with {len(df)} rows")

    for col in AIRPORT_REQUIRED_COLUMNS:
        if col not in df.columns:
            raise ValueError(f"Missing required column: {col}")

    airports = []
    for index, row in df.iterrows():
        try:
            code = str(row["code"]).strip().upper()
            if not code or code == "NAN":
                raise ValueError("empty code")

            name = row.get("name", AIRPORT_OPTIONAL_COLUMNS["name"])
            city = row.get("city", AIRPORT_OPTIONAL_COLUMNS["city"])
            fees = row.get("fees", AIRPORT_OPTIONAL_COLUMNS["fees"])
            if pd.isna(row["lat"]) or pd.isna(row["lng"]):
                raise ValueError(f"missing coordinates for {code}")

            airports.append(
                Airport(
                    code=code,
                    name=str(name) if pd.notna(name) else code,
                    city=str(city) if pd.notna(city) else "",
                    lat=float(row["lat"]),
                    lng=float(row["lng"]),
                    fees=float(fees) if pd.notna(fees) else 0.0,
                )
            )
        except (ValueError, TypeError) as e:
            logger.warning(f"Skipping airport row {index}: {e}")

    logger.info(f"Parsed {len(airports)} airports from {csv_path}")
    return airports


def load_configured_airports(config: Config) -> List[Airport]:
    """
    Load the airport set named in configuration.

    Args:
        config: Configuration object

    Returns:
        Airports from AIRPORTS_CSV, or the sample set when it is unset
    """
    if config.AIRPORTS_CSV:
        return load_airports(config.AIRPORTS_CSV, config)
    logger.info("No AIRPORTS_CSV configured, using sample airports")
    return load_sample_airports()
