from aerotrack.services.errors import (
    UpstreamAPIError,
    RateLimitError,
    NotFoundError,
    AuthError,
    ServerError,
    NetworkError,
    FeatureDisabledError,
)
from aerotrack.services.aeroapi_service import AeroAPIService
from aerotrack.services.seats_aero_service import SeatsAeroService
from aerotrack.services.airline_service import AirlineCache, AirlineService
from aerotrack.services.route_loader import RouteLoader, RouteLookupResult

__all__ = [
    "UpstreamAPIError",
    "RateLimitError",
    "NotFoundError",
    "AuthError",
    "ServerError",
    "NetworkError",
    "FeatureDisabledError",
    "AeroAPIService",
    "SeatsAeroService",
    "AirlineCache",
    "AirlineService",
    "RouteLoader",
    "RouteLookupResult",
]
