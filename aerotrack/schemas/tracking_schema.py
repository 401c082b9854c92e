from pydantic import BaseModel, Field
from typing import List, Optional

from route_engine.schemas.flight_schema import Flight, IFRRouteInfo
from aerotrack.services.search_input import SearchQuery
from route_engine.aggregation import AggregateView
from route_engine.progress import FlightTimeDisplay


class PathPoint(BaseModel):
    latitude: float
    longitude: float


class MapRegion(BaseModel):
    center: PathPoint
    latitude_span: float
    longitude_span: float


class FlightView(BaseModel):
    flight: Flight
    in_progress: bool
    progress_percent: int
    departure: FlightTimeDisplay
    arrival: FlightTimeDisplay
    departure_delay: Optional[str] = None  # e.g. "1h 5m"
    arrival_delay: Optional[str] = None
    aircraft_name: Optional[str] = None
    path: List[PathPoint] = Field(default_factory=list)
    region: Optional[MapRegion] = None


class FlightLookupResponse(BaseModel):
    ident: str
    flights: List[FlightView] = Field(default_factory=list)


class RouteLookupResponse(BaseModel):
    origin: str
    destination: str
    error: Optional[str] = None
    routes: List[IFRRouteInfo] = Field(default_factory=list)
    summary: AggregateView
    path: List[PathPoint] = Field(default_factory=list)


class AirportLookupResponse(BaseModel):
    code: str
    known: bool
    name: Optional[str] = None
    location: PathPoint


class SearchResponse(BaseModel):
    query: str
    result: SearchQuery
