import pytest
from aiohttp import web

from features.common.exceptions.marine_exceptions import FetchError
from features.forecast.services.marine_forecast_service import MarineForecastService

def make_period(i: int) -> dict:
    return {
        "name": f"Period {i}",
        "startTime": f"2024-06-0{i + 1}T06:00:00-04:00",
        "temperature": 60 + i,
        "windSpeed": "10 to 15 mph",
        "windDirection": "SW",
        "shortForecast": "Sunny",
        "detailedForecast": "Sunny, with a high near 70.",
    }

async def make_service(aiohttp_server, point_properties, periods, seen=None):
    async def points(request):
        if seen is not None:
            seen.append(request.headers.get("User-Agent"))
        properties = dict(point_properties)
        if properties.get("forecast") == "SELF":
            properties["forecast"] = str(request.url.with_path("/gridpoints/BOX/70,76/forecast"))
        return web.json_response({"properties": properties})

    async def forecast(request):
        return web.json_response({"properties": {"periods": periods}})

    app = web.Application()
    app.router.add_get("/points/{coords}", points)
    app.router.add_get("/gridpoints/BOX/70,76/forecast", forecast)
    server = await aiohttp_server(app)
    return MarineForecastService(base_url=str(server.make_url("/")))

@pytest.mark.asyncio
async def test_returns_first_seven_periods(aiohttp_server):
    seen = []
    service = await make_service(aiohttp_server, {"forecast": "SELF"}, [make_period(i) for i in range(9)], seen)
    try:
        periods = await service.get_forecast(41.3912, -71.0312)
    finally:
        await service.close()

    assert len(periods) == 7
    assert periods[0].name == "Period 0"
    assert periods[0].wind_speed == "10 to 15 mph"
    assert periods[0].wind_direction == "SW"
    assert periods[0].short_forecast == "Sunny"
    assert seen == ["(FishingBuddyApp, contact@fishingbuddy.app)"]

@pytest.mark.asyncio
async def test_missing_forecast_url_raises(aiohttp_server):
    service = await make_service(aiohttp_server, {}, [])
    try:
        with pytest.raises(FetchError):
            await service.get_forecast(0.0, 0.0)
    finally:
        await service.close()
