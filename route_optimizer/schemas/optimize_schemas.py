"""Schemas for the route optimization endpoint."""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field
from ..models.metric import Metric
from ..models.result import OptimizationResult


class OptimizeRouteRequest(BaseModel):
    """Request model for route optimization."""

    origin: str = Field(..., description="Origin airport code")
    destination: str = Field(..., description="Destination airport code")
    metric: Metric = Field(Metric.COST, description="Edge weight to minimize")

    class Config:
        json_schema_extra = {
            "example": {"origin": "JFK", "destination": "LAX", "metric": "cost"}
        }


class RouteSummary(BaseModel):
    """Formatted totals for display."""

    route: str
    distance: str
    duration: str
    cost: str
    stops: List[str]


class OptimizeRouteResponse(BaseModel):
    """Response model for route optimization."""

    optimized_route: OptimizationResult
    summary: RouteSummary
    timestamp: datetime
