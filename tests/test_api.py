import httpx
import pytest
from fastapi.testclient import TestClient

from aerotrack.dependencies import get_aeroapi, get_airline_service, get_route_loader, get_waypoints
from aerotrack.main import allowed_origins, app
from aerotrack.services.aeroapi_service import AeroAPIService
from aerotrack.services.airline_service import AirlineService
from aerotrack.services.route_loader import RouteLoader
from aerotrack.services.seats_aero_service import SeatsAeroService
from route_engine import airports
from route_engine.waypoints import WaypointDatabase
from tests.conftest import flight_payload

ROUTES_PAYLOAD = {"routes": [{
    "route": "MERIT HFD PUT 5000N/05000W",
    "count": 9,
    "aircraft_types": ["B77W", "B789"],
    "route_distance": "3,451 sm",
}]}


def aeroapi_handler(request):
    path = request.url.path
    if path.endswith("/flights/UA60"):
        return httpx.Response(200, json={"flights": [flight_payload(
            status="En Route",
            route="DCT MERIT J60 TUSKY",
            departure_delay=3900,
            scheduled_out="2026-03-07T16:00:00Z",
            estimated_out="2026-03-07T16:20:00Z",
        )], "num_pages": 1})
    if path.endswith("/flights/ZZ999"):
        return httpx.Response(200, json={"flights": [], "num_pages": 1})
    if path.endswith("/flights/to/EGLL"):
        return httpx.Response(200, json={"flights": [{"segments": [flight_payload()]}], "num_pages": 1})
    if path.endswith("/routes/EGLL"):
        return httpx.Response(200, json=ROUTES_PAYLOAD)
    if path.endswith("/operators/UAL"):
        return httpx.Response(200, json={"name": "United Airlines", "icao": "UAL", "iata": "UA", "shortname": "United"})
    if "/flights/to/" in path:
        return httpx.Response(503)
    if "/routes/" in path:
        return httpx.Response(404)
    if path.endswith("/route"):
        return httpx.Response(200, json={"fixes": [
            {"name": "MERIT", "latitude": 41.38, "longitude": -73.14},
            {"name": "TUSKY"},
        ]})
    if path.endswith("/flights/LIMIT1"):
        return httpx.Response(429)
    return httpx.Response(404)


def seats_handler(request):
    return httpx.Response(200, json={"data": [{
        "ID": "a1", "RouteID": "r1", "Date": "2026-03-20", "Source": "aeroplan",
        "FAvailable": True, "FMileageCost": "120000", "FRemainingSeats": 1,
    }], "count": 1, "hasMore": False})


@pytest.fixture
def client():
    aeroapi = AeroAPIService(api_key="k", base_url="https://aero.test/aeroapi", transport=httpx.MockTransport(aeroapi_handler))
    seats = SeatsAeroService(
        api_key="k", base_url="https://seats.test/partnerapi", enabled=True, transport=httpx.MockTransport(seats_handler)
    )
    waypoints = WaypointDatabase()

    app.dependency_overrides[get_aeroapi] = lambda: aeroapi
    app.dependency_overrides[get_waypoints] = lambda: waypoints
    app.dependency_overrides[get_route_loader] = lambda: RouteLoader(aeroapi, seats, timeout=2)
    app.dependency_overrides[get_airline_service] = lambda: AirlineService(aeroapi)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_system_health(self, client):
        body = client.get("/system-health").json()
        assert body["known_airports"] == len(airports.all_airports())
        assert body["waypoints_loaded"] > 0


class TestFlightsEndpoint:

    def test_flight_view(self, client):
        response = client.get("/flights/ua60")
        assert response.status_code == 200

        view = response.json()["flights"][0]
        assert view["in_progress"] is True
        assert 0 <= view["progress_percent"] <= 100
        assert view["flight"]["type"] == "Airline"
        assert view["departure_delay"] == "1h 5m"
        assert view["aircraft_name"] == "Boeing 777-300ER"
        assert view["departure"]["status_description"] == "20m Delayed"
        # SFO, MERIT, TUSKY, JFK
        assert len(view["path"]) == 4
        assert view["path"][0] == {"latitude": 37.6213, "longitude": -122.379}
        assert view["region"]["latitude_span"] >= 2.0

    def test_include_fixes_replaces_route_text(self, client):
        view = client.get("/flights/UA60", params={"include_fixes": True}).json()["flights"][0]
        assert view["path"] == [
            {"latitude": 41.38, "longitude": -73.14},
            {"latitude": 43.559, "longitude": -67.0},
        ]

    def test_no_flights(self, client):
        assert client.get("/flights/ZZ999").status_code == 404

    def test_rate_limited(self, client):
        response = client.get("/flights/LIMIT1")
        assert response.status_code == 429
        assert "Rate limit" in response.json()["detail"]


class TestRoutesEndpoint:

    def test_route_lookup(self, client):
        response = client.get("/routes/kjfk/egll")
        assert response.status_code == 200

        body = response.json()
        assert body["error"] is None
        assert body["summary"]["common_aircraft"] == ["B77W", "B789"]
        assert body["summary"]["total_flight_count"] == "9"
        assert body["summary"]["flight_count"] == 1
        assert body["summary"]["awards"][0]["best_cabin"]["cabin"] == "First"
        # KJFK is not in the curated table, so the first point is a placeholder
        assert len(body["path"]) == 6
        assert body["path"][4] == {"latitude": 50.0, "longitude": -50.0}

    def test_flights_failure_reported(self, client):
        body = client.get("/routes/KBOS/LFPG").json()
        assert body["error"] == "Could not load flights for this route"
        assert body["routes"] == []
        assert body["summary"]["total_flight_count"] == ""
        assert len(body["path"]) == 2


class TestReferenceEndpoints:

    def test_known_airport(self, client):
        body = client.get("/airports/jfk").json()
        assert body == {
            "code": "JFK",
            "known": True,
            "name": "John F. Kennedy International",
            "location": {"latitude": 40.6413, "longitude": -73.7781},
        }

    def test_unknown_airport(self, client):
        body = client.get("/airports/XYZ").json()
        assert body["known"] is False
        assert body["location"]["latitude"] == pytest.approx(-33.3)

    def test_search_classification(self, client):
        assert client.get("/search", params={"q": "UA60"}).json()["result"]["type"] == "flight_number"
        route = client.get("/search", params={"q": "JFK-LHR"}).json()["result"]
        assert (route["type"], route["origin"], route["destination"]) == ("route", "JFK", "LHR")
        assert client.get("/search").json()["result"]["type"] == "invalid"

    def test_airline_profile(self, client):
        body = client.get("/airlines/ual").json()
        assert body["name"] == "United Airlines"
        assert body["short_name"] == "United"

    def test_airline_not_found(self, client):
        assert client.get("/airlines/ZZZ").status_code == 404


class TestCorsOrigins:

    def test_open_outside_production(self):
        assert allowed_origins("development", "https://a.example") == ["*"]

    def test_production_uses_configured_list(self):
        configured = " https://a.example, ,https://b.example,https://a.example"
        assert allowed_origins("production", configured) == ["https://a.example", "https://b.example"]

    def test_production_without_origins(self):
        assert allowed_origins("production", "") == []
