"""Configuration module for cost-model constants and service settings."""

from typing import List, Optional
from pydantic_settings import BaseSettings


# Cost model constants
EARTH_RADIUS_MILES = 3959.0
FUEL_COST_PER_MILE = 0.8  # $ per mile
CRUISE_SPEED_MPH = 500.0  # average cruise speed

# Rounding applied to stored route fields
DISTANCE_DECIMALS = 0
COST_DECIMALS = 0
FLIGHT_TIME_DECIMALS = 1


# Valid coordinate ranges (decimal degrees)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


# CSV columns for airport files
AIRPORT_REQUIRED_COLUMNS = ["code", "lat", "lng"]
AIRPORT_OPTIONAL_COLUMNS = {
    "name": None,  # falls back to code
    "city": "",
    "fees": 0.0,
}


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Airport data (None -> built-in sample set)
    AIRPORTS_CSV: Optional[str] = None
    CSV_SEPARATOR: str = ","

    # HTTP service
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 5000
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    QUERY_LOG_FILE: Optional[str] = None

    model_config = {
        "env_prefix": "ROUTE_OPTIMIZER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
