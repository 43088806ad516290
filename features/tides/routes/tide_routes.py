from datetime import date
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query, Request
from features.tides.models.tide_types import TideStationPredictions
from features.tides.services.tide_service import TideService
from features.common.exceptions.marine_exceptions import FetchError

router = APIRouter(
    prefix="/tides",
    tags=["Tides"]
)

def get_service(request: Request) -> TideService:
    """Dependency to get the TideService instance."""
    return request.app.state.tide_service

@router.get(
    "/stations/{station_id}/predictions",
    response_model=TideStationPredictions,
    summary="Get tide predictions for a station",
    description="Returns high/low tide predictions for today and tomorrow in feet above MLLW"
)
async def get_station_predictions(
    station_id: str,
    day: Optional[date] = Query(None, alias="date", description="First day of the window"),
    service: TideService = Depends(get_service)
) -> TideStationPredictions:
    """Get tide predictions for a specific station."""
    begin_date, end_date = service.get_date_window(day)
    try:
        predictions = await service.get_predictions(station_id, today=day)
    except FetchError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return TideStationPredictions(
        id=station_id,
        begin_date=begin_date,
        end_date=end_date,
        predictions=predictions
    )
