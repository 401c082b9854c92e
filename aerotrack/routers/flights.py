from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import logging

from aerotrack.dependencies import get_aeroapi, get_waypoints
from route_engine.schemas.flight_schema import Flight, RouteFix
from aerotrack.schemas.tracking_schema import FlightLookupResponse, FlightView, MapRegion, PathPoint
from aerotrack.services.aeroapi_service import AeroAPIService
from aerotrack.services.errors import UpstreamAPIError, http_exception_for
from route_engine.aircraft_types import aircraft_name
from route_engine.progress import accurate_progress_percent, flight_times, format_delay, is_in_progress
from route_engine.route_parser import resolve_flight_path, route_region
from route_engine.waypoints import WaypointDatabase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/flights",
    tags=["flights"]
)


def to_path(coordinates) -> List[PathPoint]:
    return [PathPoint(latitude=lat, longitude=lon) for lat, lon in coordinates]


def to_region(coordinates) -> Optional[MapRegion]:
    region = route_region(coordinates)
    if region is None:
        return None
    center, lat_span, lon_span = region
    return MapRegion(
        center=PathPoint(latitude=center.latitude, longitude=center.longitude),
        latitude_span=lat_span,
        longitude_span=lon_span,
    )


def build_flight_view(flight: Flight, waypoints: WaypointDatabase, fixes: Optional[List[RouteFix]] = None) -> FlightView:
    departure, arrival = flight_times(flight)
    path = resolve_flight_path(flight, fixes, waypoints)

    return FlightView(
        flight=flight,
        in_progress=is_in_progress(flight),
        progress_percent=accurate_progress_percent(flight),
        departure=departure,
        arrival=arrival,
        departure_delay=format_delay(flight.departure_delay) if flight.departure_delay else None,
        arrival_delay=format_delay(flight.arrival_delay) if flight.arrival_delay else None,
        aircraft_name=aircraft_name(flight.aircraft_type),
        path=to_path(path),
        region=to_region(path),
    )


@router.get("/{ident}", response_model=FlightLookupResponse)
async def get_flight(
    ident: str,
    include_fixes: bool = Query(False, description="Fetch decoded route fixes for airborne flights."),
    aeroapi: AeroAPIService = Depends(get_aeroapi),
    waypoints: WaypointDatabase = Depends(get_waypoints),
):
    """
    Flights for an ident with progress, local time displays and a resolved
    route path. Provider route fixes replace the filed route text when
    include_fixes is set and the flight is airborne.
    """
    try:
        flights = await aeroapi.get_flight_info(ident)
    except UpstreamAPIError as e:
        raise http_exception_for(e)

    if not flights:
        raise HTTPException(status_code=404, detail=f"No flights found for {ident.upper()}")

    views = []
    for flight in flights:
        fixes = None
        if include_fixes and flight.fa_flight_id and is_in_progress(flight):
            try:
                fixes = await aeroapi.get_flight_route(flight.fa_flight_id)
            except UpstreamAPIError as e:
                # Route text is still available as a fallback
                logger.warning(f"Route fixes unavailable for {flight.fa_flight_id}: {e.message}")
        views.append(build_flight_view(flight, waypoints, fixes))

    return FlightLookupResponse(ident=ident.upper(), flights=views)
