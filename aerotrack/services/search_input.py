"""
Free-text search box classification: flight number, airport pair, or neither.

    "UA60"        -> flight number UA60
    "JFK → LHR"   -> route JFK, LHR
    "sfolax"      -> route SFO, LAX
    "KJFK-EGLL"   -> route KJFK, EGLL
"""
import re
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

FLIGHT_NUMBER_PATTERN = re.compile(r"^[A-Z]{2,3}[0-9]{1,4}$")

# Tried in order; the first that splits the input into two airport codes wins
ROUTE_SEPARATORS = ("→", "->", "—", "–", "-", " ", ",")


class SearchType(str, Enum):
    FLIGHT_NUMBER = "flight_number"
    ROUTE = "route"
    INVALID = "invalid"


class SearchQuery(BaseModel):
    type: SearchType
    flight_number: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None

    model_config = ConfigDict(frozen=True)


def is_airport_code(code: str) -> bool:
    return len(code) in (3, 4) and code.isalpha()


def is_flight_number(text: str) -> bool:
    return FLIGHT_NUMBER_PATTERN.match(text) is not None


def _split_route(text: str) -> Optional[Tuple[str, str]]:
    for separator in ROUTE_SEPARATORS:
        if separator not in text:
            continue
        parts = [part.strip() for part in text.split(separator) if part.strip()]
        if len(parts) == 2 and is_airport_code(parts[0]) and is_airport_code(parts[1]):
            return parts[0], parts[1]

    # Two codes run together, e.g. JFKLHR
    if 6 <= len(text) <= 8:
        midpoint = len(text) // 2
        origin, destination = text[:midpoint], text[midpoint:]
        if is_airport_code(origin) and is_airport_code(destination):
            return origin, destination

    return None


def parse_search_input(text: Optional[str]) -> SearchQuery:
    cleaned = " ".join((text or "").upper().split())
    if not cleaned:
        return SearchQuery(type=SearchType.INVALID)

    route = _split_route(cleaned)
    if route is not None:
        return SearchQuery(type=SearchType.ROUTE, origin=route[0], destination=route[1])

    if is_flight_number(cleaned):
        return SearchQuery(type=SearchType.FLIGHT_NUMBER, flight_number=cleaned)

    return SearchQuery(type=SearchType.INVALID)


def icao_to_iata(code: str) -> str:
    """KJFK -> JFK. Only US-style K-prefixed ICAO codes are converted."""
    if len(code) == 4 and code.upper().startswith("K"):
        return code[1:]
    return code
