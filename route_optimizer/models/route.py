"""Route (directed graph edge) model."""

from pydantic import BaseModel, model_validator


class Route(BaseModel):
    """Represents a directed route between two distinct airports."""

    id: str
    origin: str
    destination: str
    distance: int  # miles
    fuel_cost: int
    total_cost: int
    flight_time: float  # hours, one decimal

    @model_validator(mode="after")
    def _check_endpoints(self) -> "Route":
        if self.origin == self.destination:
            raise ValueError(f"Route {self.id} is a self-loop")
        return self

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "JFK-LAX",
                "origin": "JFK",
                "destination": "LAX",
                "distance": 2475,
                "fuel_cost": 1980,
                "total_cost": 2510,
                "flight_time": 5.0,
            }
        }
