import logging
from typing import Optional

from aerotrack.config import settings
from aerotrack.services.aeroapi_service import AeroAPIService
from aerotrack.services.airline_service import AirlineCache, AirlineService
from aerotrack.services.route_loader import RouteLoader
from aerotrack.services.seats_aero_service import SeatsAeroService
from route_engine.waypoints import WaypointDatabase

logger = logging.getLogger(__name__)

# Services keep no per-request state, one instance each serves every request
aeroapi_svc = AeroAPIService()
seats_aero_svc = SeatsAeroService()
airline_svc = AirlineService(aeroapi_svc, AirlineCache())

_waypoints: Optional[WaypointDatabase] = None


def load_waypoints() -> WaypointDatabase:
    """Seed waypoints plus whatever navigation files the settings point at."""
    db = WaypointDatabase()
    if settings.waypoint_csv_path:
        db.load_csv_file(settings.waypoint_csv_path)
    if settings.waypoint_arinc_path:
        db.load_arinc424_file(settings.waypoint_arinc_path)
    logger.info(f"Waypoint database ready with {len(db)} entries")
    return db


def get_waypoints() -> WaypointDatabase:
    global _waypoints
    if _waypoints is None:
        _waypoints = load_waypoints()
    return _waypoints


def get_aeroapi() -> AeroAPIService:
    return aeroapi_svc


def get_seats_aero() -> SeatsAeroService:
    return seats_aero_svc


def get_airline_service() -> AirlineService:
    return airline_svc


def get_route_loader() -> RouteLoader:
    # A loader cancels its previous lookup, so concurrent requests each get their own
    return RouteLoader(aeroapi_svc, seats_aero_svc)
