from route_engine.schemas.flight_schema import (
    Airport,
    Flight,
    FlightsResponse,
    RouteFix,
    IFRRouteInfo,
    AirlineProfile,
)
from route_engine.schemas.award_schema import AwardAvailability, AwardSearchResponse

__all__ = [
    "Airport",
    "Flight",
    "FlightsResponse",
    "RouteFix",
    "IFRRouteInfo",
    "AirlineProfile",
    "AwardAvailability",
    "AwardSearchResponse",
]
