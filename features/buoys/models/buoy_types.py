from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

class BuoyStation(BaseModel):
    """Buoy station the dashboard can be pointed at."""
    id: str = Field(..., description="NDBC station identifier")
    name: str = Field(..., description="Display name")
    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")

class BuoyObservation(BaseModel):
    """Latest standard meteorological row from an NDBC buoy report."""
    timestamp: str = Field(..., description="Observation time, ISO-8601 UTC")
    water_temp_c: Optional[float] = None  # WTMP
    air_temp_c: Optional[float] = None  # ATMP
    pressure_hpa: Optional[float] = None  # PRES
    wind_speed_mps: Optional[float] = None  # WSPD
    wind_direction_deg: Optional[float] = None  # WDIR, degrees clockwise from true N
    wind_gust_mps: Optional[float] = None  # GST

    @property
    def observed_at(self) -> datetime:
        return datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))

class TrendDirection(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    STEADY = "steady"

    @property
    def icon(self) -> str:
        return {"rising": "↑", "falling": "↓", "steady": "→"}[self.value]

class PressureTrend(BaseModel):
    """Barometric pressure tendency over recent buoy rows."""
    label: TrendDirection
    icon: str
    delta: Optional[float] = Field(None, description="Latest minus prior average, hPa")
    samples: int = Field(..., description="Number of readings used")
