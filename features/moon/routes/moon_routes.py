from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Query
from features.moon.models.moon_types import MoonPhase
from features.moon.services.moon_phase_calculator import calculate_moon_phase

router = APIRouter(
    prefix="/moon",
    tags=["Moon"]
)

@router.get(
    "/phase",
    response_model=MoonPhase,
    summary="Get the moon phase",
    description="Returns the approximate lunar phase, illumination and next new/full moon"
)
async def get_moon_phase(
    at: Optional[datetime] = Query(None, description="Instant to evaluate, defaults to now (UTC)")
) -> MoonPhase:
    """Get the moon phase for now or a given instant."""
    return calculate_moon_phase(at)
