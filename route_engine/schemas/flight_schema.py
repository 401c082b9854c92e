from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Airport(BaseModel):
    code: str
    code_icao: Optional[str] = None
    code_iata: Optional[str] = None
    timezone: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def display_code(self) -> str:
        # Prefer IATA, fall back to ICAO or the generic code
        return self.code_iata or self.code_icao or self.code


class Flight(BaseModel):
    ident: str
    ident_icao: Optional[str] = None
    ident_iata: Optional[str] = None
    fa_flight_id: str = ""
    operator: Optional[str] = None
    operator_icao: Optional[str] = None
    operator_iata: Optional[str] = None
    flight_number: Optional[str] = None
    registration: Optional[str] = None
    atc_ident: Optional[str] = None
    inbound_fa_flight_id: Optional[str] = None
    codeshares: List[str] = Field(default_factory=list)
    codeshares_iata: List[str] = Field(default_factory=list)
    origin: Airport
    destination: Airport
    departure_delay: Optional[int] = None  # seconds
    arrival_delay: Optional[int] = None  # seconds
    filed_ete: Optional[int] = None  # seconds
    progress_percent: Optional[int] = None
    status: str = ""
    aircraft_type: Optional[str] = None
    route_distance: Optional[int] = None
    filed_airspeed: Optional[int] = None
    filed_altitude: Optional[int] = None
    route: Optional[str] = None
    baggage_claim: Optional[str] = None
    gate_origin: Optional[str] = None
    gate_destination: Optional[str] = None
    terminal_origin: Optional[str] = None
    terminal_destination: Optional[str] = None
    flight_type: str = Field("Airline", alias="type")  # Airline | General_Aviation

    scheduled_out: Optional[str] = None
    estimated_out: Optional[str] = None
    actual_out: Optional[str] = None
    scheduled_off: Optional[str] = None
    estimated_off: Optional[str] = None
    actual_off: Optional[str] = None
    scheduled_on: Optional[str] = None
    estimated_on: Optional[str] = None
    actual_on: Optional[str] = None
    scheduled_in: Optional[str] = None
    estimated_in: Optional[str] = None
    actual_in: Optional[str] = None

    diverted: bool = False
    cancelled: bool = False
    blocked: bool = False
    position_only: bool = False

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def airline_code(self) -> Optional[str]:
        return self.operator_icao or self.operator_iata or self.operator


class FlightsResponse(BaseModel):
    flights: List[Flight] = Field(default_factory=list)
    num_pages: int = 1
    links: Optional[dict] = None


class RouteFix(BaseModel):
    name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    type: Optional[str] = None
    distance_from_origin: Optional[float] = None
    distance_this_leg: Optional[float] = None
    distance_to_destination: Optional[float] = None
    outbound_course: Optional[float] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class IFRRouteInfo(BaseModel):
    route: str = ""
    count: int = 0
    aircraft_types: List[str] = Field(default_factory=list)
    filed_altitude_min: Optional[int] = None
    filed_altitude_max: Optional[int] = None
    route_distance: str = ""
    last_departure_time: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class AirlineProfile(BaseModel):
    name: str
    short_name: Optional[str] = Field(None, alias="shortname")
    iata_code: Optional[str] = Field(None, alias="iata")
    icao_code: Optional[str] = Field(None, alias="icao")
    callsign: Optional[str] = None
    country: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = Field(None, alias="url")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
