"""API routers package initialization."""

from elroute.api.trips import router as trips_router
from elroute.api.ferries import router as ferries_router
from elroute.api.vehicles import router as vehicles_router

__all__ = [
    "trips_router",
    "ferries_router",
    "vehicles_router",
]
