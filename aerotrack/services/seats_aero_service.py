import logging
from datetime import date
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from aerotrack.config import settings
from route_engine.schemas.award_schema import AwardSearchResponse
from aerotrack.services.errors import (
    AuthError,
    FeatureDisabledError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UpstreamAPIError,
)

logger = logging.getLogger("Provider.SeatsAero")

DEFAULT_CABINS = "business,first"
PAGE_SIZE = 100


class SeatsAeroService:
    """
    seats.aero partner API, cached award availability search.

    Gated by the `seats_aero_enabled` feature flag: when it is off every call
    raises FeatureDisabledError before any request is made.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        enabled: Optional[bool] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.seats_aero_base_url).rstrip("/")
        self.api_key = (api_key if api_key is not None else settings.seats_aero_api_key).strip()
        self.enabled = settings.seats_aero_enabled if enabled is None else enabled
        self.timeout = timeout or settings.request_timeout_seconds
        self._transport = transport

    @property
    def provider_name(self) -> str:
        return "seats.aero"

    async def search_awards(
        self,
        origin: str,
        destination: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        cabins: Optional[str] = None,
        sources: Optional[str] = None,
    ) -> AwardSearchResponse:
        if not self.enabled:
            raise FeatureDisabledError(provider=self.provider_name)

        if not self.api_key:
            logger.warning("[SeatsAero] No API key configured")

        params: Dict[str, Any] = {
            "origin_airport": origin.upper(),
            "destination_airport": destination.upper(),
        }
        if start_date is not None:
            params["start_date"] = start_date.strftime("%Y-%m-%d")
        if end_date is not None:
            params["end_date"] = end_date.strftime("%Y-%m-%d")
        params["cabins"] = cabins or DEFAULT_CABINS
        if sources:
            params["sources"] = sources
        params["take"] = PAGE_SIZE
        params["order_by"] = "lowest_mileage"

        headers = {"Partner-Authorization": self.api_key, "Accept": "application/json"}

        logger.info(f"[SeatsAero] Fetching award availability: {origin} -> {destination}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/search", headers=headers, params=params)
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                logger.error("[SeatsAero] Authentication failed")
                raise AuthError("Award search authentication failed", provider=self.provider_name, upstream_status=status)
            if status == 429:
                logger.warning("[SeatsAero] Rate limit exceeded")
                raise RateLimitError(
                    "Award search limit exceeded. Please try again later.",
                    provider=self.provider_name,
                    upstream_status=status,
                )
            if status == 400:
                raise NotFoundError("No award availability found", provider=self.provider_name, upstream_status=status)

            logger.error(f"[SeatsAero] HTTP {status} for {origin}-{destination}")
            raise ServerError(
                f"Award search server error ({status}). Please try again later.",
                provider=self.provider_name,
                upstream_status=status,
            )
        except httpx.RequestError as e:
            logger.error(f"[SeatsAero] Network error for {origin}-{destination}: {e}")
            raise NetworkError(provider=self.provider_name)
        except ValueError as e:
            logger.error(f"[SeatsAero] Undecodable response body: {e}")
            raise UpstreamAPIError("Invalid response from server", provider=self.provider_name)

        try:
            result = AwardSearchResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"[SeatsAero] Unexpected payload: {e.error_count()} errors")
            raise UpstreamAPIError("Error processing award data", provider=self.provider_name)

        logger.info(f"[SeatsAero] Found {len(result.data)} award options")
        return result
