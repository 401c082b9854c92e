import pytest

from aerotrack.services.search_input import SearchType, icao_to_iata, parse_search_input


class TestParseSearchInput:

    @pytest.mark.parametrize("text,expected", [
        ("UA60", "UA60"),
        ("ba175", "BA175"),
        ("  dl1234 ", "DL1234"),
        ("UAL1", "UAL1"),
    ])
    def test_flight_numbers(self, text, expected):
        query = parse_search_input(text)
        assert query.type == SearchType.FLIGHT_NUMBER
        assert query.flight_number == expected

    @pytest.mark.parametrize("text,origin,destination", [
        ("JFK → LHR", "JFK", "LHR"),
        ("jfk->lhr", "JFK", "LHR"),
        ("SFO-LAX", "SFO", "LAX"),
        ("SFO – NRT", "SFO", "NRT"),
        ("KJFK EGLL", "KJFK", "EGLL"),
        ("jfk,  lhr", "JFK", "LHR"),
        ("sfolax", "SFO", "LAX"),
        ("KSFOKLAX", "KSFO", "KLAX"),
    ])
    def test_routes(self, text, origin, destination):
        query = parse_search_input(text)
        assert query.type == SearchType.ROUTE
        assert (query.origin, query.destination) == (origin, destination)

    @pytest.mark.parametrize("text", ["", "   ", None, "U", "UA12345", "JFK LHR CDG", "12 34", "JF-LHR"])
    def test_invalid(self, text):
        assert parse_search_input(text).type == SearchType.INVALID


class TestIcaoToIata:

    def test_us_icao(self):
        assert icao_to_iata("KJFK") == "JFK"

    def test_others_unchanged(self):
        assert icao_to_iata("EGLL") == "EGLL"
        assert icao_to_iata("JFK") == "JFK"
        assert icao_to_iata("KJF") == "KJF"
