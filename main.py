from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import logging
from pathlib import Path
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.config import settings
from core.logging_config import setup_logging

from features.common.exceptions.station_exceptions import StationDataError
from features.stations.routes.station_routes import router as station_router
from features.stations.services.station_registry import list_stations
from features.observations.services.ndbc_realtime_client import NDBCRealtimeClient
from features.observations.services.observation_service import ObservationService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.observation_service = ObservationService(NDBCRealtimeClient())

    port = os.getenv("PORT", "3000")
    logger.info(f"🌊 {settings.app_title}")
    logger.info(f"   http://localhost:{port}")
    logger.info(f"   Monitoring {len(list_stations())} NDBC stations")
    try:
        yield
    finally:
        await app.state.observation_service.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title=settings.app_title,
    description="Latest NDBC buoy observations for the Gulf of Maine",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(StationDataError)
async def station_data_error_handler(request: Request, exc: StationDataError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

app.include_router(station_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

# Front-end last so API routes take precedence
static_dir = Path(__file__).parent / settings.static_dir
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
else:
    logger.warning(f"Static directory {static_dir} not found, front-end disabled")

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 3000))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        log_level="info",
        workers=1
    )
