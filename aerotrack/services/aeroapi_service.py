"""
FlightAware AeroAPI client.

Every call is a single GET with the `x-apikey` header. Responses are decoded
into the pydantic records of `aerotrack.schemas`; non-2xx statuses and
transport failures are raised as the typed errors of
`aerotrack.services.errors`.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from aerotrack.config import settings
from route_engine.schemas.flight_schema import (
    AirlineProfile,
    Flight,
    FlightsResponse,
    IFRRouteInfo,
    RouteFix,
)
from aerotrack.services.errors import (
    AuthError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UpstreamAPIError,
)

logger = logging.getLogger("Provider.AeroAPI")


class AeroAPIService:
    """
    Usage:
        svc = AeroAPIService()
        flights = await svc.get_flight_info("UA60")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.aeroapi_base_url).rstrip("/")
        self.api_key = (api_key if api_key is not None else settings.aeroapi_key).strip()
        self.timeout = timeout or settings.request_timeout_seconds
        self._transport = transport

    @property
    def provider_name(self) -> str:
        return "aeroapi"

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        headers = {"x-apikey": self.api_key, "Accept": "application/json"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=headers, params=params)
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 429:
                logger.warning(f"[AeroAPI] Rate limit exceeded on {path}")
                raise RateLimitError(provider=self.provider_name, upstream_status=status)
            if status in (400, 404):
                logger.info(f"[AeroAPI] No results for {path} (HTTP {status})")
                raise NotFoundError(provider=self.provider_name, upstream_status=status)
            if status in (401, 403):
                logger.error(f"[AeroAPI] Authentication rejected (HTTP {status})")
                raise AuthError(provider=self.provider_name, upstream_status=status)

            logger.error(f"[AeroAPI] HTTP {status} for {path}")
            raise ServerError(provider=self.provider_name, upstream_status=status)
        except httpx.RequestError as e:
            logger.error(f"[AeroAPI] Network error for {path}: {e}")
            raise NetworkError(provider=self.provider_name)
        except ValueError as e:
            logger.error(f"[AeroAPI] Undecodable response body for {path}: {e}")
            raise UpstreamAPIError("Invalid response from server", provider=self.provider_name)

    def _decode(self, model, payload, path: str):
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"[AeroAPI] Unexpected {model.__name__} payload from {path}: {e.error_count()} errors")
            raise UpstreamAPIError("Error processing flight data", provider=self.provider_name)

    async def get_flight_info(self, ident: str) -> List[Flight]:
        """Recent and upcoming flights for an ident (e.g. UA60, UAL60)."""
        path = f"/flights/{ident.strip().upper()}"
        data = await self._get(path)
        flights = self._decode(FlightsResponse, data, path).flights
        logger.info(f"[AeroAPI] Found {len(flights)} flights for {ident}")
        return flights

    async def search_flights(self, ident: str) -> List[Flight]:
        """Airborne flights matching an ident, via the search query language."""
        path = "/flights/search"
        data = await self._get(path, params={"query": f"-idents {ident.strip().upper()}", "max_pages": 1})
        return self._decode(FlightsResponse, data, path).flights

    async def get_flights_between_airports(
        self,
        origin: str,
        destination: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        connection: Optional[str] = "nonstop",
    ) -> List[Flight]:
        """
        Scheduled flights from origin to destination. The endpoint groups legs
        into segments; the segment lists are flattened in order.
        """
        path = f"/airports/{origin.upper()}/flights/to/{destination.upper()}"
        params: Dict[str, Any] = {}
        if start is not None:
            params["start"] = start.isoformat()
        if end is not None:
            params["end"] = end.isoformat()
        if connection:
            params["connection"] = connection

        data = await self._get(path, params=params or None)

        flights: List[Flight] = []
        for entry in data.get("flights", []) or []:
            segments = entry.get("segments") if isinstance(entry, dict) else None
            if segments is None:
                segments = [entry]
            for segment in segments:
                flights.append(self._decode(Flight, segment, path))

        logger.info(f"[AeroAPI] Found {len(flights)} flights for {origin}-{destination}")
        return flights

    async def get_route_info(self, origin: str, destination: str) -> List[IFRRouteInfo]:
        """Filed IFR routes between two airports, most common first."""
        path = f"/airports/{origin.upper()}/routes/{destination.upper()}"
        data = await self._get(path)
        routes = [self._decode(IFRRouteInfo, row, path) for row in data.get("routes", []) or []]
        logger.info(f"[AeroAPI] Found {len(routes)} IFR routes for {origin}-{destination}")
        return routes

    async def get_flight_route(self, fa_flight_id: str) -> List[RouteFix]:
        """Decoded fixes of a flight's filed route."""
        path = f"/flights/{fa_flight_id}/route"
        data = await self._get(path)
        fixes = [self._decode(RouteFix, fix, path) for fix in data.get("fixes", []) or []]
        logger.debug(f"[AeroAPI] {len(fixes)} route fixes for {fa_flight_id}")
        return fixes

    async def get_operator(self, code: str) -> AirlineProfile:
        path = f"/operators/{code.strip().upper()}"
        data = await self._get(path)
        return self._decode(AirlineProfile, data, path)
