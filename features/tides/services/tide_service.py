import asyncio
import logging
import aiohttp
from datetime import date, timedelta
from typing import List, Any, Optional, Tuple

from features.tides.models.tide_types import TidePrediction, TideType
from features.common.exceptions.marine_exceptions import FetchError
from core.cache import ServiceCache
from core.config import settings

logger = logging.getLogger(__name__)

class TideService:
    """Service for interacting with NOAA CO-OPS tide data API."""

    def __init__(self, data_url: Optional[str] = None) -> None:
        """Initialize TideService."""
        self.data_url = data_url or settings.coops_base_url
        self._cache = ServiceCache("tide_predictions")

    @staticmethod
    def get_date_window(today: Optional[date] = None) -> Tuple[str, str]:
        """Get today and tomorrow as YYYYMMDD strings."""
        today = today or date.today()
        tomorrow = today + timedelta(days=1)
        return today.strftime("%Y%m%d"), tomorrow.strftime("%Y%m%d")

    async def get_predictions(
        self,
        station_id: Optional[str] = None,
        today: Optional[date] = None
    ) -> List[TidePrediction]:
        """Get high/low tide predictions for today through tomorrow.

        Args:
            station_id: CO-OPS station identifier, defaults to the configured station
            today: First day of the window, defaults to the current local date

        Raises:
            FetchError: the request failed or returned no usable predictions
        """
        station_id = station_id or settings.default_tide_station
        begin_date, end_date = self.get_date_window(today)

        cache_key = f"{station_id}:{begin_date}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        data = await self._fetch(station_id, begin_date, end_date)
        predictions = self._parse_predictions(station_id, data)

        logger.info(f"Fetched {len(predictions)} tide predictions for station {station_id}")
        await self._cache.set(cache_key, predictions)
        return predictions

    async def _fetch(self, station_id: str, begin_date: str, end_date: str) -> Any:
        params = {
            **settings.coops_params,
            "application": settings.app_name,
            "begin_date": begin_date,
            "end_date": end_date,
            "station": station_id
        }

        headers = {
            "Accept": "application/json",
        }

        try:
            timeout = aiohttp.ClientTimeout(total=settings.request["timeout"])
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.data_url, params=params, headers=headers) as response:
                    response.raise_for_status()
                    return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching tide predictions for station {station_id}: {str(e)}")
            raise FetchError(f"Error fetching tide predictions for station {station_id}: {str(e)}") from e

    def _parse_predictions(self, station_id: str, data: Any) -> List[TidePrediction]:
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected tide response for station {station_id}: {data!r}")

        if "error" in data:
            error = data["error"]
            if isinstance(error, dict):
                message = error.get("message", "Unknown error from NOAA API")
            else:
                message = str(error)
            logger.error(f"NOAA API error for station {station_id}: {message}")
            raise FetchError(message)

        raw_predictions = data.get("predictions")
        if not raw_predictions:
            raise FetchError(f"No tide data available for station {station_id}")
        if not isinstance(raw_predictions, list):
            raise FetchError(f"Unexpected tide predictions for station {station_id}: {raw_predictions!r}")

        predictions = []
        for p in raw_predictions:
            if not isinstance(p, dict):
                raise FetchError(f"Malformed tide prediction {p!r} for station {station_id}")
            try:
                tide_type = TideType(p.get("type"))
            except ValueError:
                raise FetchError(f"Unknown tide type {p.get('type')!r} for station {station_id}")
            try:
                time = str(p["t"])
                height = float(p["v"])
            except (KeyError, TypeError, ValueError):
                raise FetchError(f"Malformed tide prediction {p!r} for station {station_id}")
            predictions.append(TidePrediction(time=time, height=height, type=tide_type))

        return predictions
