from datetime import datetime, timezone

import pytest

from route_engine.progress import (
    accurate_progress_percent,
    flight_times,
    format_delay,
    format_time_with_zone,
    is_in_progress,
    parse_timestamp,
)

NOON = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestParseTimestamp:

    def test_zulu_and_offset(self):
        assert parse_timestamp("2026-01-01T12:00:00Z") == NOON
        assert parse_timestamp("2026-01-01T07:00:00-05:00") == NOON

    def test_naive_is_utc(self):
        assert parse_timestamp("2026-01-01T12:00:00") == NOON

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2026-13-45T00:00:00Z"])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


class TestIsInProgress:

    @pytest.mark.parametrize("status", ["En Route", "en route / delayed", "Airborne", "In Progress", "EN ROUTE / ON TIME"])
    def test_status_text(self, make_flight, status):
        assert is_in_progress(make_flight(status=status), NOON)

    def test_departed_and_not_landed(self, make_flight):
        flight = make_flight(status="", actual_off="2026-01-01T11:00:00Z")
        assert is_in_progress(flight, NOON)

    def test_takeoff_in_future(self, make_flight):
        flight = make_flight(status="", actual_off="2026-01-01T13:00:00Z")
        assert not is_in_progress(flight, NOON)

    def test_landed(self, make_flight):
        flight = make_flight(status="Arrived", actual_off="2026-01-01T09:00:00Z", actual_on="2026-01-01T11:00:00Z")
        assert not is_in_progress(flight, NOON)

    def test_unparseable_takeoff(self, make_flight):
        assert not is_in_progress(make_flight(status="", actual_off="garbage"), NOON)

    def test_scheduled(self, make_flight):
        assert not is_in_progress(make_flight(status="Scheduled"), NOON)


class TestProgressPercent:
    """Elapsed share of the scheduled airborne block"""

    def test_midpoint_of_four_hour_flight(self, make_flight):
        flight = make_flight(
            status="En Route",
            scheduled_off="2026-01-01T10:00:00Z",
            scheduled_on="2026-01-01T14:00:00Z",
            progress_percent=10,
        )
        assert accurate_progress_percent(flight, NOON) == 50

    def test_truncates(self, make_flight):
        flight = make_flight(
            status="En Route",
            scheduled_off="2026-01-01T09:00:00Z",
            scheduled_on="2026-01-01T15:00:00Z",
        )
        # 3h / 6h plus 10 minutes -> 52.77...
        assert accurate_progress_percent(flight, datetime(2026, 1, 1, 12, 10, tzinfo=timezone.utc)) == 52

    def test_clamped(self, make_flight):
        flight = make_flight(
            status="En Route",
            scheduled_off="2026-01-01T08:00:00Z",
            scheduled_on="2026-01-01T10:00:00Z",
        )
        assert accurate_progress_percent(flight, NOON) == 100

        early = make_flight(
            status="En Route",
            scheduled_off="2026-01-01T13:00:00Z",
            scheduled_on="2026-01-01T15:00:00Z",
        )
        assert accurate_progress_percent(early, NOON) == 0

    def test_zero_duration_uses_provider_percent(self, make_flight):
        flight = make_flight(
            status="En Route",
            scheduled_off="2026-01-01T10:00:00Z",
            scheduled_on="2026-01-01T10:00:00Z",
            progress_percent=37,
        )
        assert accurate_progress_percent(flight, NOON) == 37

    def test_negative_duration_without_provider_percent(self, make_flight):
        flight = make_flight(
            status="En Route",
            scheduled_off="2026-01-01T14:00:00Z",
            scheduled_on="2026-01-01T10:00:00Z",
            progress_percent=None,
        )
        assert accurate_progress_percent(flight, NOON) == 0

    @pytest.mark.parametrize("reported, expected", [(140, 100), (-5, 0)])
    def test_provider_percent_is_clamped(self, make_flight, reported, expected):
        flight = make_flight(status="Scheduled", progress_percent=reported)
        assert accurate_progress_percent(flight, NOON) == expected

    def test_missing_schedule(self, make_flight):
        flight = make_flight(status="En Route", scheduled_off=None, scheduled_on=None, progress_percent=64)
        assert accurate_progress_percent(flight, NOON) == 64

    def test_not_in_progress(self, make_flight):
        flight = make_flight(
            status="Scheduled",
            scheduled_off="2026-01-01T10:00:00Z",
            scheduled_on="2026-01-01T14:00:00Z",
            progress_percent=None,
        )
        assert accurate_progress_percent(flight, NOON) == 0


class TestFormatTimeWithZone:
    """Per-phase display with early / delayed descriptors (7 Mar 2026 is still EST)"""

    def test_delayed(self):
        display = format_time_with_zone(None, "2026-03-07T19:15:00Z", "2026-03-07T19:00:00Z", "America/New_York")

        assert display.display_time == "2:15 PM"
        assert display.scheduled_time == "2:00 PM"
        assert display.estimated_time == "2:15 PM"
        assert display.display_timezone == "EST"
        assert display.date == "Mar 7"
        assert display.is_delayed and not display.is_early
        assert display.minutes_difference == 15
        assert display.status_description == "15m Delayed"
        assert display.shows_scheduled_strikethrough

    def test_early(self):
        display = format_time_with_zone(None, "2026-03-07T18:50:00Z", "2026-03-07T19:00:00Z", "America/New_York")

        assert display.is_early
        assert display.minutes_difference == 10
        assert display.status_description == "10m Early"

    def test_on_time(self):
        display = format_time_with_zone(None, "2026-03-07T19:00:00Z", "2026-03-07T19:00:00Z", "America/New_York")

        assert not display.is_early and not display.is_delayed
        assert display.minutes_difference is None
        assert display.status_description is None
        assert not display.shows_scheduled_strikethrough

    def test_sub_minute_difference_ignored(self):
        display = format_time_with_zone(None, "2026-03-07T19:00:59Z", "2026-03-07T19:00:00Z", "UTC")
        assert not display.is_delayed

        display = format_time_with_zone(None, "2026-03-07T19:01:30Z", "2026-03-07T19:00:00Z", "UTC")
        assert display.is_delayed
        assert display.minutes_difference == 1

    def test_actual_wins(self):
        display = format_time_with_zone(
            "2026-03-07T19:05:00Z", "2026-03-07T19:15:00Z", "2026-03-07T19:00:00Z", "America/New_York"
        )
        assert display.display_time == "2:05 PM"
        assert display.actual_time == "2:05 PM"
        # delay flags still compare estimated with scheduled
        assert display.minutes_difference == 15

    def test_cancelled_overrides_delay(self):
        display = format_time_with_zone(
            None, "2026-03-07T19:45:00Z", "2026-03-07T19:00:00Z", "America/New_York", cancelled=True
        )
        assert display.is_delayed
        assert display.cancelled
        assert display.status_description == "Cancelled"

    def test_no_times(self):
        display = format_time_with_zone(None, None, None, None)

        assert display.display_time == "--:--"
        assert display.date == "---"
        assert display.display_timezone == "UTC"
        assert display.status_description is None
        assert not display.shows_scheduled_strikethrough

    def test_unknown_zone_falls_back_to_utc(self):
        display = format_time_with_zone(None, None, "2026-03-07T19:00:00Z", "Mars/Olympus_Mons")

        assert display.display_time == "7:00 PM"
        assert display.display_timezone == "UTC"
        assert display.timezone == "UTC"

    def test_local_date_rolls_over(self):
        display = format_time_with_zone(None, None, "2026-03-08T03:30:00Z", "America/Los_Angeles")
        assert display.display_time == "7:30 PM"
        assert display.date == "Mar 7"

    def test_serializes_descriptors(self):
        data = format_time_with_zone(None, "2026-03-07T19:15:00Z", "2026-03-07T19:00:00Z", "UTC").model_dump()
        assert data["status_description"] == "15m Delayed"
        assert data["shows_scheduled_strikethrough"] is True


class TestFlightTimes:

    def test_uses_gate_times_and_airport_zones(self, make_flight):
        flight = make_flight(
            scheduled_out="2026-03-07T16:00:00Z",
            estimated_out="2026-03-07T16:20:00Z",
            scheduled_on="2026-03-08T00:00:00Z",
            estimated_on="2026-03-08T00:05:00Z",
        )
        departure, arrival = flight_times(flight)

        assert departure.display_time == "8:20 AM"
        assert departure.display_timezone == "PST"
        assert departure.status_description == "20m Delayed"
        assert arrival.display_time == "7:05 PM"
        assert arrival.display_timezone == "EST"
        assert arrival.date == "Mar 7"


class TestFormatDelay:

    @pytest.mark.parametrize("seconds,expected", [
        (3900, "1h 5m"),
        (7200, "2h"),
        (2700, "45m"),
        (0, "0m"),
        (-600, "10m"),
    ])
    def test_format(self, seconds, expected):
        assert format_delay(seconds) == expected
