"""Schemas for airport and route listing endpoints."""

from typing import List
from pydantic import BaseModel
from ..models.airport import Airport
from ..models.route import Route


class AirportsResponse(BaseModel):
    """Response model for the airport list."""

    airports: List[Airport]


class RoutesResponse(BaseModel):
    """Response model for the route list."""

    routes: List[Route]
    count: int
