from fastapi import APIRouter, Depends
import logging

from aerotrack.dependencies import get_route_loader, get_waypoints
from aerotrack.routers.flights import to_path
from aerotrack.schemas.tracking_schema import RouteLookupResponse
from aerotrack.services.route_loader import RouteLoader
from route_engine.route_parser import parse_route
from route_engine.waypoints import WaypointDatabase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/routes",
    tags=["routes"]
)


@router.get("/{origin}/{destination}", response_model=RouteLookupResponse)
async def get_route(
    origin: str,
    destination: str,
    loader: RouteLoader = Depends(get_route_loader),
    waypoints: WaypointDatabase = Depends(get_waypoints),
):
    """
    Filed routes, today's nonstop flights and award availability for an
    airport pair. Only a flights failure is reported in `error`; the path
    follows the most commonly filed route.
    """
    result = await loader.load(origin, destination)

    route_text = result.routes[0].route if result.routes else None
    path = parse_route(route_text, result.origin, result.destination, waypoints)

    return RouteLookupResponse(
        origin=result.origin,
        destination=result.destination,
        error=result.error,
        routes=result.routes,
        summary=result.aggregate(),
        path=to_path(path),
    )
