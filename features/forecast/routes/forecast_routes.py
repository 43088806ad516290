from fastapi import APIRouter, Depends, HTTPException, Query, Request
from features.forecast.models.forecast_types import MarineForecast
from features.forecast.services.marine_forecast_service import MarineForecastService
from features.common.exceptions.marine_exceptions import FetchError

router = APIRouter(
    prefix="/forecast",
    tags=["Forecast"]
)

def get_service(request: Request) -> MarineForecastService:
    """Dependency to get the MarineForecastService instance."""
    return request.app.state.forecast_service

@router.get(
    "/marine",
    response_model=MarineForecast,
    summary="Get marine forecast for a location",
    description="Returns the next few NWS forecast periods (about 12 hours each) for a lat/lon"
)
async def get_marine_forecast(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    service: MarineForecastService = Depends(get_service)
) -> MarineForecast:
    """Get marine forecast periods for a location."""
    try:
        periods = await service.get_forecast(lat, lon)
    except FetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return MarineForecast(lat=lat, lon=lon, periods=periods)
