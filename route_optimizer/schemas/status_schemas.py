"""Schemas for status endpoints."""

from datetime import datetime
from pydantic import BaseModel


class PingResponse(BaseModel):
    """Response model for the connectivity check."""

    message: str
    timestamp: datetime
    status: str


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    uptime_seconds: float
    airports: int
    routes: int
