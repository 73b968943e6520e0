"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = True
    app_title: str = "ElRoute Trip Engine"
    app_version: str = "1.0.0"
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Energy model derating
    seasonal_derating: float = 0.85
    trailer_derating: float = 0.65
    fastest_range_modifier: float = 0.95
    shortest_range_modifier: float = 1.0
    eco_range_modifier: float = 1.10

    # Charging plan
    safety_buffer_factor: float = 0.9  # only 90% of current range is trusted
    critical_battery_floor: float = 0.10
    recharge_target_fraction: float = 0.7
    min_arrival_battery_percent: float = 5.0
    fast_charger_power_kw: float = 50.0
    normal_charger_power_kw: float = 22.0
    charge_energy_margin: float = 1.2  # energy for the remaining distance plus 20%
    safety_topup_battery_threshold: int = 40
    safety_topup_distance_km: float = 150.0
    safety_topup_minutes: int = 30
    first_stop_minutes_critical: int = 60  # battery < 20%
    first_stop_minutes_low: int = 40  # battery < 50%
    first_stop_minutes_normal: int = 25
    additional_stop_minutes: int = 35
    station_search_minutes: int = 15
    station_search_minutes_eco: int = 20

    # Duration estimation
    generic_route_minutes: int = 180
    generic_route_distance_km: float = 200.0
    fallback_road_factor: float = 1.3
    fallback_speed_kmh: float = 75.0

    # Itinerary buffers (minutes)
    long_trip_threshold_km: float = 300.0
    ferry_buffer_long: int = 60
    ferry_buffer_short: int = 30
    traffic_buffer_long: int = 60
    traffic_buffer_short: int = 30
    weather_buffer: int = 20

    # Ferry reachability
    timetable_timezone: str = "Europe/Oslo"
    boarding_margin_minutes: int = 10
    default_port_travel_minutes: int = 45
    medium_slack_minutes: int = 15
    low_reachability_percent: int = 15
    medium_reachability_percent: int = 65
    high_reachability_percent: int = 95


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
