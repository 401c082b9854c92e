"""
Coordinate Resolver: airport / fix identifier to geographic coordinate.

A small curated table of major airports backs the lookup. Unknown codes get a
deterministic placeholder coordinate derived from the code's bytes, so the
same code always lands on the same pin. Placeholder points carry no
geographic meaning.
"""
import logging
from types import MappingProxyType
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class Coordinate(NamedTuple):
    latitude: float
    longitude: float


class AirportCoordinate(NamedTuple):
    code: str
    coordinate: Coordinate
    name: str


# Each tuple: (IATA code, latitude, longitude, name)
_AIRPORTS = [
    # === North America ===
    ("JFK", 40.6413, -73.7781, "John F. Kennedy International"),
    ("LAX", 33.9425, -118.4081, "Los Angeles International"),
    ("SFO", 37.6213, -122.3790, "San Francisco International"),
    ("DFW", 32.8998, -97.0403, "Dallas/Fort Worth International"),
    ("ORD", 41.9742, -87.9073, "Chicago O'Hare International"),
    ("BOS", 42.3656, -71.0096, "Boston Logan International"),
    ("SEA", 47.4502, -122.3088, "Seattle-Tacoma International"),
    ("MIA", 25.7959, -80.2870, "Miami International"),
    ("LAS", 36.0840, -115.1537, "McCarran International"),
    ("PHX", 33.4373, -112.0078, "Phoenix Sky Harbor"),
    ("DEN", 39.8561, -104.6737, "Denver International"),
    ("ATL", 33.6407, -84.4277, "Hartsfield-Jackson Atlanta"),
    ("YYZ", 43.6777, -79.6248, "Toronto Pearson"),
    ("RDU", 35.8776, -78.7875, "Raleigh-Durham International"),

    # === Europe / Africa ===
    ("LHR", 51.4700, -0.4543, "London Heathrow"),
    ("CDG", 49.0097, 2.5479, "Charles de Gaulle"),
    ("AMS", 52.3105, 4.7683, "Amsterdam Schiphol"),
    ("FRA", 50.0379, 8.5622, "Frankfurt am Main"),
    ("RAK", 31.6068, -8.0363, "Marrakesh Menara"),

    # === Middle East ===
    ("DXB", 25.2532, 55.3657, "Dubai International"),
    ("DOH", 25.2731, 51.6081, "Hamad International"),

    # === Asia ===
    ("NRT", 35.7647, 140.3864, "Narita International"),
    ("HND", 35.5494, 139.7798, "Tokyo Haneda"),
    ("ICN", 37.4602, 126.4407, "Seoul Incheon"),
    ("SIN", 1.3644, 103.9915, "Singapore Changi"),
    ("PVG", 31.1443, 121.8083, "Shanghai Pudong"),
    ("KUL", 2.7456, 101.7072, "Kuala Lumpur International"),

    # === Oceania ===
    ("MEL", -37.6690, 144.8410, "Melbourne Airport"),
    ("SYD", -33.9399, 151.1753, "Sydney Kingsford Smith"),
    ("AKL", -37.0082, 174.7850, "Auckland Airport"),
    ("PER", -31.9385, 115.9672, "Perth Airport"),
]

AIRPORT_COORDINATES = MappingProxyType({
    code: AirportCoordinate(code=code, coordinate=Coordinate(lat, lon), name=name)
    for code, lat, lon, name in _AIRPORTS
})


def lookup(code: str) -> Optional[AirportCoordinate]:
    """Table lookup only; None when the code is not a curated airport."""
    if not code:
        return None
    return AIRPORT_COORDINATES.get(code.strip().upper())


def is_known(code: str) -> bool:
    return lookup(code) is not None


def all_airports() -> List[AirportCoordinate]:
    return list(AIRPORT_COORDINATES.values())


def placeholder_coordinate(code: str) -> Coordinate:
    """
    Deterministic stand-in for codes missing from the table.

    hash = sum of the UTF-8 bytes of the uppercased code
    latitude  in [-60, 60)   = -60 + (hash % 1200) / 10
    longitude in [-180, 180) = -180 + (hash % 3600) / 10
    """
    code_hash = sum((code or "").upper().encode("utf-8"))
    latitude = -60.0 + (code_hash % 1200) / 10.0
    longitude = -180.0 + (code_hash % 3600) / 10.0
    return Coordinate(latitude, longitude)


def resolve(code: str) -> Coordinate:
    """Always returns a coordinate: the curated one, or the placeholder."""
    airport = lookup(code)
    if airport is not None:
        return airport.coordinate

    logger.debug(f"No curated coordinate for '{code}', using placeholder")
    return placeholder_coordinate(code)
