from typing import Optional
from fastapi import APIRouter, Query
from features.moon.models.moon_types import MoonPhaseName
from features.scoring.models.score_types import FishingScoreResult, TimeOfDay
from features.scoring.services.fishing_score_engine import calculate_fishing_score
from features.tides.models.tide_types import TideType

router = APIRouter(
    prefix="/scoring",
    tags=["Scoring"]
)

@router.get(
    "/score",
    response_model=FishingScoreResult,
    summary="Score fishing conditions",
    description="Combines pressure, wind, moon phase, tide and time of day into a 0-100 fishing score"
)
async def get_fishing_score(
    pressure: Optional[float] = Query(None, description="Barometric pressure in hPa"),
    wind_speed: Optional[float] = Query(None, description="Wind speed in mph"),
    moon_phase: Optional[MoonPhaseName] = Query(None, description="Moon phase name"),
    tide_type: Optional[TideType] = Query(None, description="Next tide, H or L"),
    time_of_day: Optional[TimeOfDay] = Query(None, description="Time of day")
) -> FishingScoreResult:
    """Score fishing conditions from the given inputs."""
    return calculate_fishing_score(
        pressure=pressure,
        wind_speed=wind_speed,
        moon_phase=moon_phase,
        tide_type=tide_type,
        time_of_day=time_of_day
    )
