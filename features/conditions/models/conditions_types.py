from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from features.buoys.models.buoy_types import BuoyObservation, PressureTrend
from features.moon.models.moon_types import MoonPhase
from features.scoring.models.score_types import FishingScoreResult
from features.tides.models.tide_types import TidePrediction

class WindSummary(BaseModel):
    """Buoy wind converted for display."""
    speed_mph: Optional[int] = None
    gust_mph: Optional[int] = None
    direction_deg: Optional[float] = None
    direction: Optional[str] = Field(None, description="16-point compass direction")

class ConditionsSummary(BaseModel):
    """Everything the conditions dashboard shows for one buoy."""
    buoy_id: str
    tide_station_id: str
    generated_at: datetime
    observation: Optional[BuoyObservation] = None
    pressure_trend: Optional[PressureTrend] = None
    wind: WindSummary
    water_temp_f: Optional[float] = None
    air_temp_f: Optional[float] = None
    tides: List[TidePrediction] = Field(default_factory=list)
    next_tide: Optional[TidePrediction] = None
    moon: MoonPhase
    fishing: FishingScoreResult
    warnings: List[str] = Field(default_factory=list, description="Sources that could not be loaded")
