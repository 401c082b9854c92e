"""
Waypoint database: identifier → Waypoint, seeded with common enroute and
oceanic fixes and optionally extended from ARINC 424 or CSV navigation files.

Identifiers are stored uppercased. On collisions the last write wins, whether
it came from the seed table or from a bulk load.
"""
import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from route_engine.airports import Coordinate
from route_engine.arinc424 import Waypoint, parse_line

logger = logging.getLogger(__name__)

# Each tuple: (identifier, latitude, longitude)
SEED_WAYPOINTS = (
    # === North Atlantic ===
    ("MERIT", 41.375837, -73.135792),
    ("TUSKY", 43.559, -67.0),
    ("ELSIR", 44.0, -63.0),
    ("MALOT", 52.0, -40.0),
    ("GISTI", 55.0, -20.0),
    ("LIFFY", 56.0, -15.0),
    ("DOLAS", 50.0, 0.0),
    ("LAMSO", 48.0, 5.0),
    ("XETBO", 54.0, -30.0),
    ("EVRIN", 55.0, -25.0),
    ("BEXET", 52.0, -15.0),
    ("NETKI", 54.0, -10.0),
    ("DOGAL", 51.0, -35.0),

    # === US East Coast ===
    ("HFD", 41.736, -72.651),
    ("PUT", 41.9, -70.0),
    ("BWZ", 39.175, -76.668),
    ("SWL", 38.945, -77.454),
    ("BETTE", 40.555543, -73.007035),
    ("ACK", 41.253, -70.060),
    ("KANNI", 42.633333, -67.0),
    ("BRADD", 43.15, -67.0),
    ("WITCH", 42.676640, -70.874390),
    ("ALLEX", 44.416667, -67.0),
    ("SUPRY", 44.0, -62.0),
    ("PORTI", 43.5, -64.0),
    ("JOOPY", 45.0, -60.0),
    ("NICSO", 46.0, -55.0),

    # === US West Coast ===
    ("LAX", 33.9425, -118.4081),
    ("SFO", 37.6213, -122.3790),
    ("SEA", 47.450, -122.309),

    # === Europe ===
    ("WAL", 52.0, -2.0),
    ("DVR", 51.127, 1.328),
    ("CALDA", 50.5, 1.5),
    ("INFEC", 52.5, -8.0),
    ("JETZI", 51.5, -5.0),
    ("AMFUL", 50.5, -2.0),
    ("CAWZE", 50.0, 0.0),
    ("SIRIC", 49.5, 2.0),
    ("KONAN", 49.0, 5.0),
    ("REMBA", 48.5, 8.0),
    ("MATUG", 47.0, 10.0),
    ("AMASI", 45.5, 12.0),
    ("BOMBI", 44.0, 14.0),
    ("TENLO", 42.5, 16.0),
    ("DEXIT", 41.0, 18.0),
    ("PESAT", 39.5, 20.0),
    ("DEGET", 38.0, 22.0),
    ("LUGEB", 36.5, 24.0),

    # === Middle East / Asia ===
    ("UDROS", 35.0, 45.0),
    ("TBN", 33.0, 48.0),
    ("YAVUZ", 40.0, 35.0),
    ("INDUR", 30.0, 60.0),
    ("VETEN", 28.0, 65.0),
    ("SULEL", 25.0, 68.0),
    ("BODKA", 22.0, 70.0),
    ("MAMED", 20.0, 72.0),
    ("DOLOS", 18.0, 74.0),
    ("RUBAD", 15.0, 76.0),
    ("RANAH", 12.0, 78.0),
    ("BIROS", 10.0, 80.0),
    ("VIKIT", 8.0, 85.0),
    ("IBANI", 6.0, 90.0),
    ("IDKUT", 4.0, 95.0),
    ("GIVAL", 2.0, 100.0),
    ("VPL", 3.0, 101.5),
    ("RINBA", 2.5, 102.0),
    ("MAKNA", 2.0, 102.5),
    ("TOPOR", 1.5, 103.0),
    ("ARAMA", 1.3, 103.5),
    ("TEBUN", 1.35, 103.8),

    # === NAT oceanic shorthand ===
    ("5000N", 50.0, -50.0),
    ("5100N", 51.0, -40.0),
    ("5200N", 52.0, -30.0),
    ("5300N", 53.0, -20.0),
    ("5400N", 54.0, -10.0),

    # === Pacific ===
    ("ALLBE", 36.0, -140.0),
    ("TUNEE", 40.0, -150.0),
)

PathLike = Union[str, Path]


class WaypointDatabase:
    """
    In-memory waypoint table.

    Usage:
        db = WaypointDatabase()
        db.load_arinc424_file("FAACIFP18")
        db.get("merit").coordinate
    """

    def __init__(self, seed: bool = True):
        self._waypoints: Dict[str, Waypoint] = {}
        if seed:
            self._load_seed()

    def _load_seed(self):
        for identifier, lat, lon in SEED_WAYPOINTS:
            self.add(Waypoint(identifier=identifier, coordinate=Coordinate(lat, lon)))

    def add(self, waypoint: Waypoint):
        self._waypoints[waypoint.identifier.upper()] = waypoint

    def get(self, identifier: str) -> Optional[Waypoint]:
        if not identifier:
            return None
        return self._waypoints.get(identifier.strip().upper())

    def __contains__(self, identifier) -> bool:
        return isinstance(identifier, str) and self.get(identifier) is not None

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self._waypoints.values())

    def load_arinc424_lines(self, lines: Iterable[str]) -> int:
        loaded = 0
        skipped = 0
        for line in lines:
            waypoint = parse_line(line.rstrip("\r\n"))
            if waypoint is None:
                skipped += 1
                continue
            self.add(waypoint)
            loaded += 1

        logger.info(f"Loaded {loaded} waypoints from ARINC 424 data ({skipped} lines skipped)")
        return loaded

    def load_arinc424_file(self, path: PathLike) -> int:
        """Bulk-load an ARINC 424 file. Returns the number of waypoints inserted."""
        try:
            with open(path, encoding="latin-1") as fh:
                return self.load_arinc424_lines(fh)
        except OSError as e:
            logger.error(f"Failed to load ARINC 424 file at {path}: {e}")
            return 0

    def load_csv_file(self, path: PathLike) -> int:
        """
        Load a navigation CSV export. Two layouts are accepted, header row first:

            identifier,latitude,longitude,type,nav_type,usage,region   (7+ columns)
            identifier,latitude,longitude,type,usage,region            (6 columns)
        """
        try:
            with open(path, newline="", encoding="utf-8") as fh:
                rows = list(csv.reader(fh))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read waypoint CSV at {path}: {e}")
            return 0

        loaded = 0
        for row in rows[1:]:
            waypoint = self._waypoint_from_row(row)
            if waypoint is None:
                continue
            self.add(waypoint)
            loaded += 1

        logger.info(f"Loaded {loaded} waypoints from {Path(path).name}")
        return loaded

    @staticmethod
    def _waypoint_from_row(row) -> Optional[Waypoint]:
        if len(row) < 6:
            return None

        cells = [cell.strip() for cell in row]
        identifier = cells[0].upper()
        if not identifier:
            return None

        try:
            latitude = float(cells[1])
            longitude = float(cells[2])
        except ValueError:
            return None

        if len(cells) >= 7:
            usage, region = cells[5], cells[6]
        else:
            usage, region = cells[4], cells[5]

        return Waypoint(
            identifier=identifier,
            coordinate=Coordinate(latitude, longitude),
            type=cells[3],
            usage=usage,
            region=region,
        )
