from fastapi import APIRouter, Depends, Query

from aerotrack.dependencies import get_airline_service
from route_engine.schemas.flight_schema import AirlineProfile
from aerotrack.schemas.tracking_schema import AirportLookupResponse, PathPoint, SearchResponse
from aerotrack.services.airline_service import AirlineService
from aerotrack.services.errors import UpstreamAPIError, http_exception_for
from aerotrack.services.search_input import parse_search_input
from route_engine import airports

router = APIRouter(tags=["reference"])


@router.get("/search", response_model=SearchResponse)
def classify_search(q: str = Query("", description="Flight number or airport pair, e.g. UA60 or JFK-LHR")):
    return SearchResponse(query=q, result=parse_search_input(q))


@router.get("/airports/{code}", response_model=AirportLookupResponse)
def get_airport(code: str):
    # Unknown codes still get a stable placeholder location
    entry = airports.lookup(code)
    location = airports.resolve(code)
    return AirportLookupResponse(
        code=code.strip().upper(),
        known=entry is not None,
        name=entry.name if entry else None,
        location=PathPoint(latitude=location.latitude, longitude=location.longitude),
    )


@router.get("/airlines/{code}", response_model=AirlineProfile, response_model_by_alias=False)
async def get_airline(code: str, airlines: AirlineService = Depends(get_airline_service)):
    try:
        return await airlines.get_airline_info(code)
    except UpstreamAPIError as e:
        raise http_exception_for(e)
