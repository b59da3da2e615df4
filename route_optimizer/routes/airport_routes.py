"""Routes for airport and route listing endpoints."""

import logging
from typing import Optional
from fastapi import APIRouter
from ..schemas.airport_schemas import AirportsResponse, RoutesResponse
from ..services.singleton import get_route_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["airports"])


@router.get("/airports", response_model=AirportsResponse)
async def get_airports():
    """
    Get the airports of the current graph.

    Returns:
        Airport list in input order
    """
    route_service = get_route_service()
    return AirportsResponse(airports=route_service.get_airports())


@router.get("/routes", response_model=RoutesResponse)
async def get_routes(origin: Optional[str] = None):
    """
    Get the generated routes.

    Args:
        origin: Only return routes leaving this airport

    Returns:
        Route list and count
    """
    route_service = get_route_service()
    routes = route_service.get_routes(origin.upper() if origin else None)
    return RoutesResponse(routes=routes, count=len(routes))
