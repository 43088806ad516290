from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from features.conditions.models.conditions_types import ConditionsSummary
from features.conditions.services.conditions_service import ConditionsService
from features.scoring.models.score_types import TimeOfDay

router = APIRouter(
    prefix="/conditions",
    tags=["Conditions"]
)

def get_service(request: Request) -> ConditionsService:
    """Dependency to get the ConditionsService instance."""
    return request.app.state.conditions_service

@router.get(
    "/{buoy_id}",
    response_model=ConditionsSummary,
    summary="Get fishing conditions for a buoy",
    description="Returns buoy observations, tides, moon phase and a fishing score. "
                "Sources that fail are listed in warnings instead of failing the request."
)
async def get_conditions(
    buoy_id: str,
    tide_station: Optional[str] = Query(None, description="CO-OPS tide station, defaults to the configured station"),
    time_of_day: Optional[TimeOfDay] = Query(None),
    service: ConditionsService = Depends(get_service)
) -> ConditionsSummary:
    """Get the conditions dashboard for a buoy."""
    return await service.get_conditions(buoy_id, tide_station, time_of_day)
