"""
ARINC 424 fixed-width waypoint records.

Column layout used here (0-based, end-exclusive):

    [6:10]   region / area code
    [13:18]  waypoint identifier
    [32:41]  latitude   HDDMMSSss   e.g. N36442340
    [41:51]  longitude  HDDDMMSSss  e.g. W121282270

Seconds carry an implied two decimal places. Anything that does not match the
layout is rejected with None; callers treat rejection as "skip this line".
"""
import logging
from dataclasses import dataclass
from typing import Optional

from route_engine.airports import Coordinate

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 51

REGION_SLICE = slice(6, 10)
IDENT_SLICE = slice(13, 18)
LAT_SLICE = slice(32, 41)
LON_SLICE = slice(41, 51)


@dataclass(frozen=True)
class Waypoint:
    identifier: str
    coordinate: Coordinate
    type: str = "WAYPOINT"
    usage: str = "ENROUTE"
    region: str = "UNKNOWN"


def _parse_block(block: str, degree_digits: int, positive: str, negative: str) -> Optional[float]:
    # direction + degrees + MM + SSss
    if len(block) != 1 + degree_digits + 2 + 4:
        return None

    direction, digits = block[0], block[1:]
    if direction not in (positive, negative) or not (digits.isascii() and digits.isdigit()):
        return None

    degrees = int(digits[:degree_digits])
    minutes = int(digits[degree_digits:degree_digits + 2])
    hundredths = int(digits[degree_digits + 2:])

    value = degrees + minutes / 60.0 + (hundredths / 100.0) / 3600.0
    return value if direction == positive else -value


def parse_coordinate(lat_block: str, lon_block: str) -> Optional[Coordinate]:
    latitude = _parse_block(lat_block, 2, "N", "S")
    longitude = _parse_block(lon_block, 3, "E", "W")
    if latitude is None or longitude is None:
        return None
    if abs(latitude) > 90.0 or abs(longitude) > 180.0:
        return None
    return Coordinate(latitude, longitude)


def parse_line(line: str) -> Optional[Waypoint]:
    """Decode one fixed-width record, or None when the line does not fit the layout."""
    if line is None or len(line) < MIN_LINE_LENGTH:
        return None

    identifier = line[IDENT_SLICE].strip().upper()
    if not identifier:
        return None

    coordinate = parse_coordinate(line[LAT_SLICE], line[LON_SLICE])
    if coordinate is None:
        logger.debug(f"Rejected ARINC 424 coordinate for {identifier}: {line[LAT_SLICE]!r} {line[LON_SLICE]!r}")
        return None

    return Waypoint(
        identifier=identifier,
        coordinate=coordinate,
        type="WAYPOINT",
        usage="ENROUTE",
        region=line[REGION_SLICE],
    )
