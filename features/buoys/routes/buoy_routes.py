from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from features.buoys.models.buoy_types import BuoyObservation, BuoyStation, PressureTrend
from features.buoys.services.ndbc_buoy_client import NDBCBuoyClient
from features.common.exceptions.marine_exceptions import FetchError, ParseError
import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/buoys",
    tags=["Buoys"]
)

def get_client(request: Request) -> NDBCBuoyClient:
    """Dependency to get the NDBCBuoyClient instance."""
    return request.app.state.buoy_client

@router.get(
    "",
    response_model=List[BuoyStation],
    summary="Get default buoys",
    description="Returns the buoys the conditions dashboard can be pointed at"
)
async def get_buoys(
    client: NDBCBuoyClient = Depends(get_client)
) -> List[BuoyStation]:
    """Get the configured buoys."""
    return client.get_stations()

@router.get(
    "/{station_id}/observations",
    response_model=BuoyObservation,
    summary="Get latest buoy observation",
    description="Returns the newest NDBC standard meteorological observation; unreported fields are null"
)
async def get_buoy_observation(
    station_id: str,
    client: NDBCBuoyClient = Depends(get_client)
) -> BuoyObservation:
    """Get the latest observation for a buoy."""
    try:
        return await client.get_observation(station_id)
    except FetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ParseError as e:
        logger.warning(f"Unparseable report from buoy {station_id}: {str(e)}")
        raise HTTPException(status_code=502, detail=str(e))

@router.get(
    "/{station_id}/pressure-trend",
    response_model=PressureTrend,
    summary="Get barometric pressure trend",
    description="Compares the latest pressure against the average of the preceding readings"
)
async def get_pressure_trend(
    station_id: str,
    client: NDBCBuoyClient = Depends(get_client)
) -> PressureTrend:
    """Get the pressure trend for a buoy."""
    try:
        return await client.get_pressure_trend(station_id)
    except FetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ParseError as e:
        logger.warning(f"Unparseable report from buoy {station_id}: {str(e)}")
        raise HTTPException(status_code=502, detail=str(e))
