"""
Flight Progress & Timing Engine.

Works on already-decoded Flight records:
  - is_in_progress:            status text first, then actual off/on timestamps
  - accurate_progress_percent: elapsed / scheduled block of the airborne phase
  - format_time_with_zone:     display struct for one phase (out or on), with
                               early / delayed / cancelled descriptors

Malformed or missing timestamps never raise; they fall back to the provider's
own values or to the "no data" display.
"""
import logging
from datetime import datetime, tzinfo
from typing import Optional, Tuple

import pytz
from pydantic import BaseModel, ConfigDict, computed_field

from route_engine.schemas.flight_schema import Flight

logger = logging.getLogger(__name__)

IN_PROGRESS_STATUSES = (
    "en route",
    "in progress",
    "airborne",
    "en route / delayed",
)

NO_TIME = "--:--"
NO_DATE = "---"


class FlightTimeDisplay(BaseModel):
    display_time: str
    display_timezone: str
    actual_time: Optional[str] = None
    scheduled_time: Optional[str] = None
    estimated_time: Optional[str] = None
    date: str
    full_date: Optional[datetime] = None
    timezone: str = "UTC"
    is_early: bool = False
    is_delayed: bool = False
    minutes_difference: Optional[int] = None
    cancelled: bool = False

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def status_description(self) -> Optional[str]:
        if self.cancelled:
            return "Cancelled"
        if self.minutes_difference is not None:
            if self.is_early:
                return f"{self.minutes_difference}m Early"
            if self.is_delayed:
                return f"{self.minutes_difference}m Delayed"
        return None

    @computed_field
    @property
    def shows_scheduled_strikethrough(self) -> bool:
        return self.scheduled_time is not None and self.scheduled_time != self.display_time


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """ISO-8601 instant, or None. Naive values are read as UTC."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=pytz.UTC)
    return parsed


def _now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(pytz.UTC)
    if now.tzinfo is None:
        return now.replace(tzinfo=pytz.UTC)
    return now


def is_in_progress(flight: Flight, now: Optional[datetime] = None) -> bool:
    status = (flight.status or "").lower()
    if any(marker in status for marker in IN_PROGRESS_STATUSES):
        return True

    if flight.actual_off is None or flight.actual_on is not None:
        return False

    off_time = parse_timestamp(flight.actual_off)
    if off_time is None:
        return False

    return off_time < _now(now)


def accurate_progress_percent(flight: Flight, now: Optional[datetime] = None) -> int:
    """
    Percent of the scheduled airborne block elapsed, clamped to [0, 100].
    Falls back to the provider's progress_percent (or 0), clamped the same way,
    when the flight is not airborne or the schedule cannot be used.
    """
    provider_percent = min(max(flight.progress_percent or 0, 0), 100)

    if not is_in_progress(flight, now):
        return provider_percent

    off_time = parse_timestamp(flight.scheduled_off)
    on_time = parse_timestamp(flight.scheduled_on)
    if off_time is None or on_time is None:
        return provider_percent

    total = (on_time - off_time).total_seconds()
    if total <= 0:
        logger.debug(f"{flight.ident}: non-positive scheduled block, using provider progress")
        return provider_percent

    elapsed = (_now(now) - off_time).total_seconds()
    percent = min(max(elapsed / total * 100.0, 0.0), 100.0)
    return int(percent)


def resolve_timezone(name: Optional[str]) -> tzinfo:
    if not name:
        return pytz.UTC
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.debug(f"Unknown timezone {name!r}, using UTC")
        return pytz.UTC


def format_clock(moment: datetime, zone: tzinfo) -> str:
    # 2:05 PM
    local = moment.astimezone(zone)
    return local.strftime("%I:%M %p").lstrip("0")


def format_day(moment: datetime, zone: tzinfo) -> str:
    # Mar 7
    local = moment.astimezone(zone)
    return f"{local.strftime('%b')} {local.day}"


def zone_abbreviation(moment: Optional[datetime], zone: tzinfo) -> str:
    reference = moment or datetime.now(pytz.UTC)
    return reference.astimezone(zone).tzname() or "UTC"


def format_time_with_zone(
    actual: Optional[str],
    estimated: Optional[str],
    scheduled: Optional[str],
    timezone: Optional[str],
    cancelled: bool = False,
) -> FlightTimeDisplay:
    zone = resolve_timezone(timezone)
    zone_name = timezone if zone is not pytz.UTC else "UTC"

    actual_at = parse_timestamp(actual)
    estimated_at = parse_timestamp(estimated)
    scheduled_at = parse_timestamp(scheduled)

    is_early = False
    is_delayed = False
    minutes_difference = None
    if estimated_at is not None and scheduled_at is not None:
        # whole minutes, truncated toward zero
        difference = int((scheduled_at - estimated_at).total_seconds() / 60)
        if difference > 0:
            is_early = True
            minutes_difference = difference
        elif difference < 0:
            is_delayed = True
            minutes_difference = abs(difference)

    scheduled_time = format_clock(scheduled_at, zone) if scheduled_at else None
    estimated_time = format_clock(estimated_at, zone) if estimated_at else None
    shown = actual_at or estimated_at or scheduled_at

    if shown is None:
        return FlightTimeDisplay(
            display_time=NO_TIME,
            display_timezone=zone_abbreviation(None, zone),
            date=NO_DATE,
            timezone=zone_name,
            cancelled=cancelled,
        )

    return FlightTimeDisplay(
        display_time=format_clock(shown, zone),
        display_timezone=zone_abbreviation(shown, zone),
        actual_time=format_clock(actual_at, zone) if actual_at else None,
        scheduled_time=scheduled_time,
        estimated_time=estimated_time,
        date=format_day(shown, zone),
        full_date=shown.astimezone(zone),
        timezone=zone_name,
        is_early=is_early,
        is_delayed=is_delayed,
        minutes_difference=minutes_difference,
        cancelled=cancelled,
    )


def flight_times(flight: Flight) -> Tuple[FlightTimeDisplay, FlightTimeDisplay]:
    """Gate departure (out) and gate arrival (on) displays in the airports' local zones."""
    departure = format_time_with_zone(
        actual=flight.actual_out,
        estimated=flight.estimated_out,
        scheduled=flight.scheduled_out,
        timezone=flight.origin.timezone,
        cancelled=flight.cancelled,
    )
    arrival = format_time_with_zone(
        actual=flight.actual_on,
        estimated=flight.estimated_on,
        scheduled=flight.scheduled_on,
        timezone=flight.destination.timezone,
        cancelled=flight.cancelled,
    )
    return departure, arrival


def format_delay(seconds: int) -> str:
    """3900 -> '1h 5m', 7200 -> '2h', 2700 -> '45m'. Sign is ignored."""
    total = abs(int(seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"
    return f"{minutes}m"
