import os
import pytest

# Use test env
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("AEROAPI_KEY", "aero_test")
os.environ.setdefault("SEATS_AERO_API_KEY", "seats_test")
os.environ.setdefault("SEATS_AERO_ENABLED", "true")
os.environ.setdefault("REQUEST_TIMEOUT_SECONDS", "5")

import httpx

from route_engine.schemas.award_schema import AwardAvailability
from route_engine.schemas.flight_schema import Flight

# 132-column FAA CIFP enroute waypoint record (26FLW, near Salinas CA)
ARINC_LINE = (
    "SUSAEAENRT   26FLW K21    I D   N36442340W121282270"
    "                       E0156     NAS        B     FLW306/D126           021528110"
)


def airport_payload(code, iata=None, icao=None, timezone="America/New_York", name=None, city=None):
    return {
        "code": icao or code,
        "code_icao": icao,
        "code_iata": iata,
        "timezone": timezone,
        "name": name,
        "city": city,
    }


def flight_payload(**overrides):
    payload = {
        "ident": "UAL60",
        "ident_icao": "UAL60",
        "ident_iata": "UA60",
        "fa_flight_id": "UAL60-1700000000-airline-0001",
        "operator": "UAL",
        "operator_icao": "UAL",
        "operator_iata": "UA",
        "flight_number": "60",
        "registration": "N12345",
        "origin": airport_payload("KSFO", iata="SFO", icao="KSFO", timezone="America/Los_Angeles"),
        "destination": airport_payload("KJFK", iata="JFK", icao="KJFK", timezone="America/New_York"),
        "status": "Scheduled",
        "aircraft_type": "B77W",
        "route": None,
        "type": "Airline",
        "progress_percent": 0,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_flight():
    def _make(**overrides):
        return Flight.model_validate(flight_payload(**overrides))
    return _make


@pytest.fixture
def make_award():
    def _make(**overrides):
        payload = {"ID": "award-1", "RouteID": "route-1", "Date": "2026-11-01", "Source": "aeroplan"}
        payload.update(overrides)
        return AwardAvailability.model_validate(payload)
    return _make


@pytest.fixture
def arinc_line():
    return ARINC_LINE


@pytest.fixture
def mock_transport():
    """
    Builds an httpx.MockTransport from a handler and records every request
    it sees on `transport.requests`.
    """
    def _build(handler):
        requests = []

        def _record(request):
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(_record)
        transport.requests = requests
        return transport
    return _build
