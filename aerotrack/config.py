from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    # App Settings
    app_name: str = "aerotrack Flight Tracker"
    env: str = "development"
    log_level: str = "INFO"

    # Third Party: FlightAware AeroAPI
    aeroapi_base_url: str = "https://aeroapi.flightaware.com/aeroapi"
    aeroapi_key: str = ""

    # Third Party: seats.aero partner API
    seats_aero_base_url: str = "https://seats.aero/partnerapi"
    seats_aero_api_key: str = ""
    seats_aero_enabled: bool = True  # Feature flag for award search

    # Outbound requests
    request_timeout_seconds: float = 15.0

    # Route lookup
    award_search_days: int = 30
    award_cabins: str = "business,first"

    # Navigation data (optional extra waypoints on top of the built-in seed)
    waypoint_arinc_path: Optional[str] = None
    waypoint_csv_path: Optional[str] = None

    # CORS
    cors_origins: str = ""  # Comma-separated production origins

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
