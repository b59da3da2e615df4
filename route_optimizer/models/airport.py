"""Airport model."""

from pydantic import BaseModel, Field


class Airport(BaseModel):
    """Represents an airport node: identity, location and fixed fee."""

    code: str = Field(..., min_length=1)
    name: str
    city: str = ""
    lat: float  # decimal degrees
    lng: float  # decimal degrees
    fees: float = 0.0  # non-negative, checked by Validator

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "code": "JFK",
                "name": "John F. Kennedy International",
                "city": "New York",
                "lat": 40.6413,
                "lng": -73.7781,
                "fees": 250.0,
            }
        }
