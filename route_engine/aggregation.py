"""
Award/Route Aggregation: folds the three route-lookup results (filed IFR
routes, scheduled flights, award rows) into one view.

Pure: nothing here raises on missing fields, and empty inputs produce an
empty view.
"""
from collections import Counter
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from route_engine.schemas.award_schema import AwardAvailability
from route_engine.schemas.flight_schema import Flight, IFRRouteInfo
from route_engine.aircraft_types import aircraft_name

COMMON_AIRCRAFT_LIMIT = 8

# (cabin label, field prefix), highest tier first
CABIN_PRIORITY = (
    ("First", "f"),
    ("Business", "j"),
    ("Premium Economy", "w"),
    ("Economy", "y"),
)


class CabinOption(BaseModel):
    cabin: str
    cost: str
    seats: int

    model_config = ConfigDict(frozen=True)


class AwardOption(BaseModel):
    award: AwardAvailability
    best_cabin: Optional[CabinOption] = None


class AggregateView(BaseModel):
    common_aircraft: List[str] = Field(default_factory=list)
    common_aircraft_names: List[str] = Field(default_factory=list)
    total_flight_count: str = ""
    flight_count: int = 0
    flights: List[Flight] = Field(default_factory=list)
    awards: List[AwardOption] = Field(default_factory=list)


def best_available_cabin(award: AwardAvailability) -> Optional[CabinOption]:
    for cabin, prefix in CABIN_PRIORITY:
        available = getattr(award, f"{prefix}_available")
        cost = getattr(award, f"{prefix}_mileage_cost")
        seats = getattr(award, f"{prefix}_remaining_seats")
        if available and cost is not None and seats is not None:
            return CabinOption(cabin=cabin, cost=cost, seats=seats)
    return None


def common_aircraft(routes: Iterable[IFRRouteInfo], limit: int = COMMON_AIRCRAFT_LIMIT) -> List[str]:
    """
    Distinct aircraft types across the route records, most frequently listed
    first (one vote per record), ties broken alphabetically.
    """
    votes = Counter()
    for route in routes:
        for aircraft_type in set(route.aircraft_types or []):
            if aircraft_type:
                votes[aircraft_type] += 1

    ranked = sorted(votes.items(), key=lambda item: (-item[1], item[0]))
    return [aircraft_type for aircraft_type, _ in ranked[:limit]]


def total_flight_count(routes: Iterable[IFRRouteInfo]) -> str:
    total = sum(route.count or 0 for route in routes)
    return str(total) if total > 0 else ""


def aggregate(
    routes: Iterable[IFRRouteInfo],
    flights: Iterable[Flight],
    awards: Iterable[AwardAvailability],
) -> AggregateView:
    routes = list(routes or [])
    flights = list(flights or [])
    awards = list(awards or [])

    aircraft = common_aircraft(routes)
    return AggregateView(
        common_aircraft=aircraft,
        common_aircraft_names=[aircraft_name(code) for code in aircraft],
        total_flight_count=total_flight_count(routes),
        flight_count=len(flights),
        flights=flights,
        awards=[AwardOption(award=award, best_cabin=best_available_cabin(award)) for award in awards],
    )
