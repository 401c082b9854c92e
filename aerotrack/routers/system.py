from fastapi import APIRouter, Depends

from aerotrack.config import settings
from aerotrack.dependencies import get_airline_service, get_waypoints
from aerotrack.services.airline_service import AirlineService
from route_engine.airports import all_airports
from route_engine.waypoints import WaypointDatabase

router = APIRouter(prefix="/system-health", tags=["System"])

@router.get("")
def get_system_health(
    waypoints: WaypointDatabase = Depends(get_waypoints),
    airlines: AirlineService = Depends(get_airline_service),
):
    return {
        "known_airports": len(all_airports()),
        "waypoints_loaded": len(waypoints),
        "cached_airlines": len(airlines.cache),
        "aeroapi_configured": bool(settings.aeroapi_key),
        "award_search_enabled": settings.seats_aero_enabled,
    }
