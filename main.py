from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.config import settings
from core.logging_config import setup_logging

# Feature routes
from features.buoys.routes.buoy_routes import router as buoy_router
from features.tides.routes.tide_routes import router as tide_router
from features.moon.routes.moon_routes import router as moon_router
from features.scoring.routes.score_routes import router as score_router
from features.forecast.routes.forecast_routes import router as forecast_router
from features.conditions.routes.conditions_routes import router as conditions_router

# Services and clients
from features.buoys.services.ndbc_buoy_client import NDBCBuoyClient
from features.tides.services.tide_service import TideService
from features.forecast.services.marine_forecast_service import MarineForecastService
from features.conditions.services.conditions_service import ConditionsService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(f"🎣 Starting {settings.app_name} conditions API...")

    buoy_client = NDBCBuoyClient()
    tide_service = TideService()

    app.state.buoy_client = buoy_client
    app.state.tide_service = tide_service
    app.state.forecast_service = MarineForecastService()
    app.state.conditions_service = ConditionsService(
        buoy_client=buoy_client,
        tide_service=tide_service
    )

    logger.info("✨ API startup complete - ready to serve requests")
    try:
        yield
    finally:
        logger.info("🔄 Shutting down API...")
        await app.state.buoy_client.close()
        await app.state.forecast_service.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="Fishing Buddy Conditions API",
    description="Buoy observations, tides, moon phase and fishing scores",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include feature routers
app.include_router(buoy_router)
app.include_router(tide_router)
app.include_router(moon_router)
app.include_router(score_router)
app.include_router(forecast_router)
app.include_router(conditions_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5010))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level="info",
        workers=1
    )
