import asyncio
import logging
import aiohttp
from typing import List, Optional, Tuple

from features.buoys.models.buoy_types import BuoyObservation, BuoyStation, PressureTrend
from features.buoys.services.buoy_report_parser import (
    parse_buoy_report,
    parse_observation_and_trend
)
from features.common.exceptions.marine_exceptions import FetchError
from core.cache import ServiceCache
from core.config import settings

logger = logging.getLogger(__name__)

class NDBCBuoyClient:
    """Client for NDBC realtime standard meteorological reports."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url or settings.ndbc_base_url
        self._session: Optional[aiohttp.ClientSession] = None
        self._cache = ServiceCache("buoy_reports")

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=settings.request["timeout"])
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    def get_stations(self) -> List[BuoyStation]:
        """Get the configured default buoys."""
        return [BuoyStation(**buoy) for buoy in settings.default_buoys]

    async def fetch_report(self, station_id: str) -> str:
        """Fetch the raw text report for a station."""
        cached = await self._cache.get(station_id)
        if cached is not None:
            return cached

        url = f"{self.base_url.rstrip('/')}/{station_id}.{settings.ndbc_report_suffix}"
        try:
            session = await self._init_session()
            async with session.get(url) as response:
                response.raise_for_status()
                text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error fetching buoy report for station {station_id}: {str(e)}")
            raise FetchError(f"Error fetching buoy report for station {station_id}: {str(e)}") from e

        await self._cache.set(station_id, text)
        return text

    async def get_observation(self, station_id: str) -> BuoyObservation:
        """Get the latest observation for a station.

        Raises:
            FetchError: the report could not be downloaded
            ParseError: the report was malformed
        """
        text = await self.fetch_report(station_id)
        observation = parse_buoy_report(text)
        logger.info(f"Buoy {station_id} observation at {observation.timestamp}")
        return observation

    async def get_pressure_trend(self, station_id: str) -> PressureTrend:
        """Get pressure tendency over the most recent report rows."""
        _, trend = await self.get_observation_with_trend(station_id)
        return trend

    async def get_observation_with_trend(self, station_id: str) -> Tuple[BuoyObservation, PressureTrend]:
        """Get the latest observation and the pressure trend from one report.

        Raises:
            FetchError: the report could not be downloaded
            ParseError: the newest row was malformed
        """
        text = await self.fetch_report(station_id)
        return parse_observation_and_trend(text, limit=settings.pressure_history_rows)
