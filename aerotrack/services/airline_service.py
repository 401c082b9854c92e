import logging
from typing import Dict, Optional

from route_engine.schemas.flight_schema import AirlineProfile
from aerotrack.services.aeroapi_service import AeroAPIService

logger = logging.getLogger(__name__)


class AirlineCache:
    """Airline profiles keyed by uppercased operator code. Unbounded; entries never expire."""

    def __init__(self):
        self._profiles: Dict[str, AirlineProfile] = {}

    def get(self, code: str) -> Optional[AirlineProfile]:
        return self._profiles.get(code.upper())

    def put(self, code: str, profile: AirlineProfile):
        self._profiles[code.upper()] = profile

    def clear(self):
        self._profiles.clear()

    def __len__(self) -> int:
        return len(self._profiles)


class AirlineService:
    def __init__(self, aeroapi: AeroAPIService, cache: Optional[AirlineCache] = None):
        self.aeroapi = aeroapi
        self.cache = cache if cache is not None else AirlineCache()

    async def get_airline_info(self, code: str) -> AirlineProfile:
        """Operator profile, served from the cache after the first successful fetch."""
        cached = self.cache.get(code)
        if cached is not None:
            logger.debug(f"Using cached airline info for {code}")
            return cached

        profile = await self.aeroapi.get_operator(code)
        self.cache.put(code, profile)
        return profile
