"""Routes for route optimization."""

import logging
from datetime import datetime
from fastapi import APIRouter, HTTPException
from ..schemas.optimize_schemas import OptimizeRouteRequest, OptimizeRouteResponse
from ..services.singleton import get_route_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["optimization"])


@router.post("/optimize-route", response_model=OptimizeRouteResponse)
async def optimize_route(request: OptimizeRouteRequest):
    """
    Find the best route between two airports.

    Args:
        request: Origin, destination and metric

    Returns:
        Optimized route with formatted summary
    """
    route_service = get_route_service()

    try:
        payload = route_service.optimize(request.origin, request.destination, request.metric)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error optimizing route {request.origin} -> {request.destination}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if payload is None:
        raise HTTPException(
            status_code=404,
            detail=(
                f"No route from '{request.origin}' to '{request.destination}': "
                "airports must be known and different"
            ),
        )

    return OptimizeRouteResponse(timestamp=datetime.now(), **payload)
