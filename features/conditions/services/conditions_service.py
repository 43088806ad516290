import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from features.buoys.models.buoy_types import BuoyObservation, PressureTrend
from features.buoys.services.ndbc_buoy_client import NDBCBuoyClient
from features.common.exceptions.marine_exceptions import MarineDataError
from features.common.utils.conversions import UnitConversions
from features.conditions.models.conditions_types import ConditionsSummary, WindSummary
from features.moon.services.moon_phase_calculator import calculate_moon_phase
from features.scoring.models.score_types import TimeOfDay
from features.scoring.services.fishing_score_engine import calculate_fishing_score
from features.tides.models.tide_types import TidePrediction
from features.tides.services.tide_service import TideService
from core.config import settings

logger = logging.getLogger(__name__)

class ConditionsService:
    """Merges buoy, tide and moon data into a scored conditions summary.

    A source that fails is reported in ``warnings`` and left empty so the rest
    of the dashboard still renders.
    """

    def __init__(self, buoy_client: NDBCBuoyClient, tide_service: TideService):
        self.buoy_client = buoy_client
        self.tide_service = tide_service

    async def _load_buoy(self, buoy_id: str) -> Tuple[BuoyObservation, PressureTrend]:
        return await self.buoy_client.get_observation_with_trend(buoy_id)

    @staticmethod
    def _wind_summary(observation: Optional[BuoyObservation]) -> WindSummary:
        if observation is None:
            return WindSummary()
        speed = observation.wind_speed_mps
        gust = observation.wind_gust_mps
        direction = observation.wind_direction_deg
        return WindSummary(
            speed_mph=UnitConversions.mps_to_mph(speed) if speed is not None else None,
            gust_mph=UnitConversions.mps_to_mph(gust) if gust is not None else None,
            direction_deg=direction,
            direction=UnitConversions.wind_direction(direction) if direction is not None else None
        )

    async def get_conditions(
        self,
        buoy_id: str,
        tide_station_id: Optional[str] = None,
        time_of_day: Optional[TimeOfDay] = None,
        now: Optional[datetime] = None
    ) -> ConditionsSummary:
        """Build the conditions summary for a buoy and tide station."""
        tide_station_id = tide_station_id or settings.default_tide_station
        now = now or datetime.now(timezone.utc)
        warnings: List[str] = []

        buoy_result, tide_result = await asyncio.gather(
            self._load_buoy(buoy_id),
            self.tide_service.get_predictions(tide_station_id),
            return_exceptions=True
        )

        observation: Optional[BuoyObservation] = None
        trend: Optional[PressureTrend] = None
        if isinstance(buoy_result, MarineDataError):
            logger.warning(f"Buoy {buoy_id} unavailable: {str(buoy_result)}")
            warnings.append(f"Buoy data unavailable: {str(buoy_result)}")
        elif isinstance(buoy_result, BaseException):
            raise buoy_result
        else:
            observation, trend = buoy_result

        tides: List[TidePrediction] = []
        if isinstance(tide_result, MarineDataError):
            logger.warning(f"Tides for station {tide_station_id} unavailable: {str(tide_result)}")
            warnings.append(f"Tide data unavailable: {str(tide_result)}")
        elif isinstance(tide_result, BaseException):
            raise tide_result
        else:
            tides = tide_result

        wind = self._wind_summary(observation)
        moon = calculate_moon_phase(now)
        next_tide = tides[0] if tides else None

        fishing = calculate_fishing_score(
            pressure=observation.pressure_hpa if observation else None,
            wind_speed=wind.speed_mph,
            moon_phase=moon.phase,
            tide_type=next_tide.type if next_tide else None,
            time_of_day=time_of_day
        )

        return ConditionsSummary(
            buoy_id=buoy_id,
            tide_station_id=tide_station_id,
            generated_at=now,
            observation=observation,
            pressure_trend=trend,
            wind=wind,
            water_temp_f=UnitConversions.celsius_to_fahrenheit(observation.water_temp_c) if observation else None,
            air_temp_f=UnitConversions.celsius_to_fahrenheit(observation.air_temp_c) if observation else None,
            tides=tides,
            next_tide=next_tide,
            moon=moon,
            fishing=fishing,
            warnings=warnings
        )
