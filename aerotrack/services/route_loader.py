"""
Route lookup: filed IFR routes, today's nonstop flights and award
availability for an airport pair, fetched concurrently.

Route info and awards are optional. Their failures are logged and leave the
corresponding list empty. A failed flights call is the only failure reported
back to the caller, as `error`.
"""
import asyncio
import logging
from datetime import datetime, timedelta
from typing import List, Optional

import pytz
from pydantic import BaseModel, Field

from aerotrack.config import settings
from route_engine.schemas.award_schema import AwardAvailability
from route_engine.schemas.flight_schema import Flight, IFRRouteInfo
from aerotrack.services.aeroapi_service import AeroAPIService
from aerotrack.services.errors import FeatureDisabledError, UpstreamAPIError
from aerotrack.services.search_input import icao_to_iata
from aerotrack.services.seats_aero_service import SeatsAeroService
from route_engine.aggregation import AggregateView, aggregate

logger = logging.getLogger("RouteLoader")

FLIGHTS_ERROR_MESSAGE = "Could not load flights for this route"


class RouteLookupResult(BaseModel):
    origin: str
    destination: str
    routes: List[IFRRouteInfo] = Field(default_factory=list)
    flights: List[Flight] = Field(default_factory=list)
    awards: List[AwardAvailability] = Field(default_factory=list)
    error: Optional[str] = None

    def aggregate(self) -> AggregateView:
        return aggregate(self.routes, self.flights, self.awards)


class RouteLoader:
    """
    Holds at most one in-flight lookup. Starting a new lookup, or calling
    cancel(), cancels the previous one.

    Usage:
        loader = RouteLoader(AeroAPIService(), SeatsAeroService())
        result = await loader.load("JFK", "LHR")
    """

    def __init__(
        self,
        aeroapi: AeroAPIService,
        seats_aero: SeatsAeroService,
        timeout: Optional[float] = None,
        award_search_days: Optional[int] = None,
        award_cabins: Optional[str] = None,
    ):
        self.aeroapi = aeroapi
        self.seats_aero = seats_aero
        self.timeout = timeout or settings.request_timeout_seconds
        self.award_search_days = award_search_days or settings.award_search_days
        self.award_cabins = award_cabins or settings.award_cabins
        self._task: Optional[asyncio.Task] = None

    @property
    def is_loading(self) -> bool:
        return self._task is not None and not self._task.done()

    def cancel(self):
        if self.is_loading:
            logger.info("Cancelling in-flight route lookup")
            self._task.cancel()
        self._task = None

    async def load(self, origin: str, destination: str, now: Optional[datetime] = None) -> RouteLookupResult:
        self.cancel()
        task = asyncio.ensure_future(self._load(origin.upper(), destination.upper(), now))
        self._task = task
        try:
            return await task
        finally:
            if self._task is task:
                self._task = None

    async def _load(self, origin: str, destination: str, now: Optional[datetime]) -> RouteLookupResult:
        now = now or datetime.now(pytz.UTC)
        result = RouteLookupResult(origin=origin, destination=destination)

        routes, flights, awards = await asyncio.gather(
            self._load_route_info(origin, destination),
            self._load_flights(origin, destination, now),
            self._load_awards(origin, destination, now),
        )

        result.routes = routes or []
        result.awards = awards or []
        if flights is None:
            result.error = FLIGHTS_ERROR_MESSAGE
        else:
            result.flights = flights

        return result

    async def _bounded(self, coroutine):
        return await asyncio.wait_for(coroutine, timeout=self.timeout)

    async def _load_route_info(self, origin: str, destination: str) -> List[IFRRouteInfo]:
        try:
            routes = await self._bounded(self.aeroapi.get_route_info(origin, destination))
            logger.info(f"Loaded {len(routes)} IFR routes")
            return routes
        except (UpstreamAPIError, asyncio.TimeoutError) as e:
            logger.warning(f"Failed to load route info for {origin}-{destination}: {e!r}")
            return []

    async def _load_flights(self, origin: str, destination: str, now: datetime) -> Optional[List[Flight]]:
        try:
            flights = await self._bounded(
                self.aeroapi.get_flights_between_airports(
                    origin,
                    destination,
                    start=now,
                    end=now + timedelta(days=1),
                    connection="nonstop",
                )
            )
            logger.info(f"Loaded {len(flights)} flights")
            return flights
        except (UpstreamAPIError, asyncio.TimeoutError) as e:
            logger.warning(f"Failed to load flights for {origin}-{destination}: {e!r}")
            return None

    async def _load_awards(self, origin: str, destination: str, now: datetime) -> List[AwardAvailability]:
        if not self.seats_aero.enabled:
            logger.info("Seats.aero disabled, skipping award search")
            return []

        start = now.date()
        end = start + timedelta(days=self.award_search_days)
        try:
            response = await self._bounded(
                self.seats_aero.search_awards(
                    icao_to_iata(origin),
                    icao_to_iata(destination),
                    start_date=start,
                    end_date=end,
                    cabins=self.award_cabins,
                )
            )
            logger.info(f"Loaded {len(response.data)} award options")
            return response.data
        except FeatureDisabledError:
            logger.info("Seats.aero feature disabled, skipping award search")
            return []
        except (UpstreamAPIError, asyncio.TimeoutError) as e:
            logger.warning(f"Failed to load awards for {origin}-{destination}: {e!r}")
            return []
