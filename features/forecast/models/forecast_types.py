from typing import List, Optional
from pydantic import BaseModel, Field

class MarineForecastPeriod(BaseModel):
    """One ~12 hour NWS forecast period."""
    name: str = Field(..., description='Period name, e.g. "Tonight"')
    start_time: str
    temperature: Optional[float] = None
    wind_speed: Optional[str] = Field(None, description='e.g. "10 to 15 mph"')
    wind_direction: Optional[str] = Field(None, description='e.g. "SW"')
    short_forecast: Optional[str] = None
    detailed_forecast: Optional[str] = None

class MarineForecast(BaseModel):
    lat: float
    lon: float
    periods: List[MarineForecastPeriod]
