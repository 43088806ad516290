from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List, Any, Optional

class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "FishingBuddy"

    # NDBC realtime buoy reports
    ndbc_base_url: str = "https://www.ndbc.noaa.gov/data/realtime2/"
    ndbc_report_suffix: str = "txt"  # Standard meteorological data
    default_buoys: List[Dict[str, Any]] = [
        {"id": "44020", "name": "Block Island (44020)", "lat": 40.97, "lon": -71.12},
        {"id": "44097", "name": "Buzzards Bay (44097)", "lat": 41.39, "lon": -71.03},
        {"id": "44025", "name": "Long Island (44025)", "lat": 40.25, "lon": -73.16},
    ]

    # Pressure trend over recent buoy rows
    pressure_history_rows: int = 6
    pressure_trend_threshold: float = 0.5  # hPa

    # NOAA CO-OPS tide predictions
    coops_base_url: str = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
    coops_params: Dict[str, str] = {
        "product": "predictions",
        "datum": "MLLW",
        "time_zone": "lst_ldt",
        "units": "english",
        "interval": "hilo",
        "format": "json"
    }
    default_tide_station: str = "8443970"  # Boston, MA

    # National Weather Service forecast
    nws_base_url: str = "https://api.weather.gov"
    nws_user_agent: str = "(FishingBuddyApp, contact@fishingbuddy.app)"
    forecast_periods: int = 7  # Each period is ~12 hours

    request: Dict[str, Any] = {
        "timeout": 30
    }

    cache: Dict[str, Any] = {
        "enabled": True,
        "prefix": "fishing_buddy"
    }

    # Log timestamps are rendered at this offset from UTC
    log_utc_offset_hours: int = -5
    log_timezone_label: str = "EST"

    def get_cache_ttl(self) -> Dict[str, Optional[int]]:
        """Get cache TTL values in seconds."""
        return {
            "buoy_reports": 600,        # 10 minutes (NDBC updates at :26 and :56)
            "tide_predictions": 86400,  # 24 hours for tide predictions
            "marine_forecast": 3600     # 1 hour
        }

    model_config = SettingsConfigDict(
        env_prefix="fishbuddy_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
