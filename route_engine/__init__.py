"""
Computational core: coordinate resolution, route decoding, progress timing and
route aggregation. Everything here is synchronous and side-effect free apart
from logging and the optional waypoint file loads.
"""
from route_engine.airports import Coordinate, resolve
from route_engine.arinc424 import Waypoint, parse_line
from route_engine.waypoints import WaypointDatabase
from route_engine.route_parser import parse_route, parse_route_fixes, resolve_flight_path
from route_engine.progress import (
    FlightTimeDisplay,
    accurate_progress_percent,
    format_time_with_zone,
    is_in_progress,
)
from route_engine.aggregation import AggregateView, aggregate, best_available_cabin

__all__ = [
    "Coordinate",
    "resolve",
    "Waypoint",
    "parse_line",
    "WaypointDatabase",
    "parse_route",
    "parse_route_fixes",
    "resolve_flight_path",
    "FlightTimeDisplay",
    "accurate_progress_percent",
    "format_time_with_zone",
    "is_in_progress",
    "AggregateView",
    "aggregate",
    "best_available_cabin",
]
