import asyncio
import logging
import aiohttp
from typing import Any, Dict, List, Optional

from features.forecast.models.forecast_types import MarineForecastPeriod
from features.common.exceptions.marine_exceptions import FetchError
from core.cache import ServiceCache
from core.config import settings

logger = logging.getLogger(__name__)

class MarineForecastService:
    """Service for National Weather Service point forecasts."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.nws_base_url).rstrip("/")
        self._session: Optional[aiohttp.ClientSession] = None
        self._cache = ServiceCache("marine_forecast")

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=settings.request["timeout"]),
                headers={
                    "User-Agent": settings.nws_user_agent,
                    "Accept": "application/geo+json"
                }
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def _get_json(self, url: str) -> Dict[str, Any]:
        try:
            session = await self._init_session()
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching {url}: {str(e)}")
            raise FetchError(f"Error fetching marine forecast: {str(e)}") from e

    async def get_forecast(self, lat: float, lon: float) -> List[MarineForecastPeriod]:
        """Get the next forecast periods for a location.

        The NWS API is two-step: the points endpoint resolves a location to its
        forecast grid URL, which is then fetched for the periods.

        Raises:
            FetchError: either request failed, or no forecast covers the location
        """
        cache_key = f"{lat:.4f},{lon:.4f}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        point_data = await self._get_json(f"{self.base_url}/points/{cache_key}")
        forecast_url = (point_data.get("properties") or {}).get("forecast")
        if not forecast_url:
            raise FetchError(f"No forecast available for {cache_key}")

        forecast_data = await self._get_json(forecast_url)
        raw_periods = (forecast_data.get("properties") or {}).get("periods") or []

        periods = [
            MarineForecastPeriod(
                name=period.get("name", ""),
                start_time=period.get("startTime", ""),
                temperature=period.get("temperature"),
                wind_speed=period.get("windSpeed"),
                wind_direction=period.get("windDirection"),
                short_forecast=period.get("shortForecast"),
                detailed_forecast=period.get("detailedForecast")
            )
            for period in raw_periods[:settings.forecast_periods]
        ]

        logger.info(f"Fetched {len(periods)} forecast periods for {cache_key}")
        await self._cache.set(cache_key, periods)
        return periods
