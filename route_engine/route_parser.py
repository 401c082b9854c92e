"""
Route String Parser: filed flight-plan route text to an ordered list of
coordinates.

The route text is a whitespace-separated mix of airway designators, named
fixes, oceanic lat/lon groups, NAT track references and speed/level groups.
Only the tokens that name a point contribute a coordinate; the rest are
dropped without complaint. Origin and destination always bracket the result.

When the flight-data provider returns its own decoded fixes for a flight,
`parse_route_fixes` is preferred over the text.
"""
import logging
import math
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from route_engine import airports
from route_engine.airports import Coordinate
from route_engine.waypoints import WaypointDatabase

logger = logging.getLogger(__name__)

AIRWAY_PATTERN = re.compile(r"^[A-Z]+[0-9]+$")
NAT_TRACK_PATTERN = re.compile(r"^NAT[A-Z]$")
SPEED_LEVEL_PATTERN = re.compile(r"^[MNK][0-9]{3,4}[FAMS][0-9]{3,4}$")
OCEANIC_SLASH_PATTERN = re.compile(r"^([0-9]{1,5})([NS])/([0-9]{1,5})([EW])$")
OCEANIC_COMPACT_PATTERN = re.compile(r"^([0-9]{2}|[0-9]{4})([NS])([0-9]{3}|[0-9]{5})([EW])$")

EARTH_RADIUS_KM = 6371.0
MAX_FIX_JUMP_KM = 15000.0

_default_waypoints: Optional[WaypointDatabase] = None


def default_waypoints() -> WaypointDatabase:
    global _default_waypoints
    if _default_waypoints is None:
        _default_waypoints = WaypointDatabase()
    return _default_waypoints


def is_airway_designator(token: str) -> bool:
    return AIRWAY_PATTERN.match(token) is not None


def is_nat_track(token: str) -> bool:
    return token.startswith("NATW") or NAT_TRACK_PATTERN.match(token) is not None


def is_speed_level_group(token: str) -> bool:
    return SPEED_LEVEL_PATTERN.match(token) is not None


def _scaled(digits: str, scaled_length: int) -> float:
    value = float(int(digits))
    return value / 100.0 if len(digits) == scaled_length else value


def _oceanic_from_groups(lat_digits, lat_dir, lon_digits, lon_dir) -> Optional[Coordinate]:
    latitude = _scaled(lat_digits, 4)
    longitude = _scaled(lon_digits, 5)
    if latitude > 90.0 or longitude > 180.0:
        return None

    if lat_dir == "S":
        latitude = -latitude
    if lon_dir == "W":
        longitude = -longitude
    return Coordinate(latitude, longitude)


def parse_oceanic_coordinate(token: str) -> Optional[Coordinate]:
    """
    Decode an oceanic lat/lon group.

        5000N/05000W -> (50.0, -50.0)    4-digit latitude and 5-digit longitude are /100
        52N/020W     -> (52.0, -20.0)    other lengths are taken as-is
        28S142E      -> (-28.0, 142.0)   compact form, same digit rules
    """
    match = OCEANIC_SLASH_PATTERN.match(token) or OCEANIC_COMPACT_PATTERN.match(token)
    if match is None:
        return None
    return _oceanic_from_groups(*match.groups())


def _split_speed_suffix(token: str) -> str:
    # OLREL/N0483F300 -> OLREL
    if "/" in token:
        head, _, tail = token.partition("/")
        if head and is_speed_level_group(tail):
            return head
    return token


def parse_route(
    route_text: Optional[str],
    origin: str,
    destination: str,
    waypoints: Optional[WaypointDatabase] = None,
) -> List[Coordinate]:
    """
    Resolve a filed route string into coordinates, origin first and
    destination last. Unknown tokens are skipped; consecutive duplicates are kept.
    """
    waypoints = waypoints if waypoints is not None else default_waypoints()
    coordinates = [airports.resolve(origin)]

    for raw_token in (route_text or "").split():
        token = raw_token.strip().upper()
        if not token or token == "DCT" or is_speed_level_group(token):
            continue

        if is_airway_designator(token):
            continue

        if is_nat_track(token):
            continue

        oceanic = parse_oceanic_coordinate(token)
        if oceanic is not None:
            coordinates.append(oceanic)
            continue

        name = _split_speed_suffix(token)
        if name != token:
            # the point part of WAYPT/N0483F300 can itself be an oceanic group
            oceanic = parse_oceanic_coordinate(name)
            if oceanic is not None:
                coordinates.append(oceanic)
                continue
            if is_airway_designator(name):
                continue

        waypoint = waypoints.get(name)
        if waypoint is not None:
            coordinates.append(waypoint.coordinate)
            continue

        airport = airports.lookup(name)
        if airport is not None:
            coordinates.append(airport.coordinate)
            continue

        logger.debug(f"Unknown waypoint/fix: {token}")

    coordinates.append(airports.resolve(destination))
    return coordinates


def great_circle_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometres."""
    lat1, lon1 = math.radians(a[0]), math.radians(a[1])
    lat2, lon2 = math.radians(b[0]), math.radians(b[1])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def _fix_coordinate(fix) -> Optional[Coordinate]:
    latitude = getattr(fix, "latitude", None)
    longitude = getattr(fix, "longitude", None)
    if latitude is None or longitude is None:
        return None
    if abs(latitude) > 90.0 or abs(longitude) > 180.0:
        return None
    return Coordinate(float(latitude), float(longitude))


def parse_route_fixes(fixes: Iterable, waypoints: Optional[WaypointDatabase] = None) -> List[Coordinate]:
    """
    Coordinates for the provider's decoded route fixes.

    A fix's own coordinate is used when it is in range and does not jump more
    than MAX_FIX_JUMP_KM from the previous accepted point; otherwise the fix
    name is looked up in the waypoint table. Unresolvable fixes are skipped.
    """
    waypoints = waypoints if waypoints is not None else default_waypoints()
    coordinates: List[Coordinate] = []
    fixes = list(fixes)

    for fix in fixes:
        candidate = _fix_coordinate(fix)
        if candidate is not None and coordinates:
            distance = great_circle_km(coordinates[-1], candidate)
            if distance > MAX_FIX_JUMP_KM:
                logger.debug(f"Skipping {getattr(fix, 'name', '?')} provider coordinate, {int(distance)}km jump")
                candidate = None

        if candidate is None:
            waypoint = waypoints.get(getattr(fix, "name", "") or "")
            if waypoint is None:
                logger.debug(f"Skipping unresolved fix: {getattr(fix, 'name', '?')}")
                continue
            candidate = waypoint.coordinate

        coordinates.append(candidate)

    logger.debug(f"Parsed {len(coordinates)} coordinates from {len(fixes)} route fixes")
    return coordinates


def resolve_flight_path(
    flight,
    fixes: Optional[Sequence] = None,
    waypoints: Optional[WaypointDatabase] = None,
) -> List[Coordinate]:
    """Provider fixes when there are any, otherwise the filed route text."""
    if fixes:
        path = parse_route_fixes(fixes, waypoints)
        if path:
            return path

    return parse_route(
        flight.route,
        flight.origin.display_code,
        flight.destination.display_code,
        waypoints,
    )


def unwrap_longitudes(coordinates: Sequence[Coordinate]) -> List[Coordinate]:
    """
    Make longitudes continuous across the antimeridian: each step of more than
    180 degrees is shifted by 360 so that SFO -> SYD continues west past -180.
    """
    unwrapped: List[Coordinate] = []
    offset = 0.0
    previous = None
    for latitude, longitude in coordinates:
        if previous is not None:
            step = longitude - previous
            if step > 180.0:
                offset -= 360.0
            elif step < -180.0:
                offset += 360.0
        previous = longitude
        unwrapped.append(Coordinate(latitude, longitude + offset))
    return unwrapped


def _normalize_longitude(longitude: float) -> float:
    return ((longitude + 180.0) % 360.0) - 180.0


def route_region(
    coordinates: Sequence[Coordinate],
    padding: float = 1.4,
    minimum_span: float = 2.0,
) -> Optional[Tuple[Coordinate, float, float]]:
    """
    (center, latitude span, longitude span) framing the route, computed on the
    unwrapped longitudes. None for an empty sequence.
    """
    if not coordinates:
        return None

    unwrapped = unwrap_longitudes(coordinates)
    latitudes = [c.latitude for c in unwrapped]
    longitudes = [c.longitude for c in unwrapped]

    center = Coordinate(
        (min(latitudes) + max(latitudes)) / 2.0,
        _normalize_longitude((min(longitudes) + max(longitudes)) / 2.0),
    )
    lat_span = max((max(latitudes) - min(latitudes)) * padding, minimum_span)
    lon_span = max(min((max(longitudes) - min(longitudes)) * padding, 360.0), minimum_span)
    return center, lat_span, lon_span
