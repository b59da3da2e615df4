"""Routes for test and health endpoints."""

import logging
from datetime import datetime
from fastapi import APIRouter
from ..schemas.status_schemas import HealthResponse, PingResponse
from ..services.singleton import get_route_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/test", response_model=PingResponse)
async def test_connection():
    """Connectivity check."""
    return PingResponse(
        message="Backend is working!",
        timestamp=datetime.now(),
        status="success",
    )


@router.get("/health", response_model=HealthResponse)
async def get_health():
    """
    Get service health.

    Returns:
        Uptime and graph size
    """
    route_service = get_route_service()
    return HealthResponse(**route_service.get_health())
