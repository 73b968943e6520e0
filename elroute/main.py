"""
ElRoute Trip Engine - FastAPI Application
Main entry point for the API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from elroute.config import get_settings
from elroute.core.exceptions import GeocodingFailure, NoReachableStation
from elroute.api import trips_router, ferries_router, vehicles_router
from elroute.schemas.api import HealthResponse


settings = get_settings()
logger = logging.getLogger("elroute")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    configure_logging(settings.log_level)
    logger.info("Starting %s v%s", settings.app_title, settings.app_version)
    yield
    logger.info("Shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="""
    ## ElRoute Trip Engine API

    Feasibility estimates for electric-vehicle trips in Norway.

    ### Features
    - **Duration**: Curated corridor times with route-type adjustment
    - **Charging**: Usable range, charging stops and the first mandatory station
    - **Departure**: Recommended departure for a desired arrival time
    - **Ferries**: Reachability of the next two departures

    ### Main Endpoints
    - `POST /api/v1/trips/duration` - Estimate travel time
    - `POST /api/v1/trips/charging-plan` - Plan charging for a distance
    - `POST /api/v1/trips/mandatory-stop` - Find the mandatory charging stop
    - `POST /api/v1/trips/departure` - Recommend a departure time
    - `POST /api/v1/ferries/reachability` - Ferry reachability tiers
    """,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GeocodingFailure)
async def geocoding_failure_handler(request: Request, exc: GeocodingFailure) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "address": exc.address},
    )


@app.exception_handler(NoReachableStation)
async def no_reachable_station_handler(request: Request, exc: NoReachableStation) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)},
    )


# Include API routers
app.include_router(trips_router, prefix=settings.api_prefix)
app.include_router(ferries_router, prefix=settings.api_prefix)
app.include_router(vehicles_router, prefix=settings.api_prefix)


@app.get("/", tags=["Health"], response_model=HealthResponse)
async def root():
    """Root endpoint - health check."""
    return HealthResponse(
        status="healthy",
        service=settings.app_title,
        version=settings.app_version,
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
