"""
FastAPI dependencies providing the engine's external collaborators.
Override these in tests via app.dependency_overrides.
"""

from typing import Tuple

from fastapi import HTTPException, status

from elroute.schemas.trip import ChargingStation, FerryRoute, Vehicle
from elroute.services.catalog import (
    Geocoder,
    KnownPlacesGeocoder,
    get_vehicle,
    list_charging_stations,
    list_ferry_routes,
)

_geocoder = KnownPlacesGeocoder()


def get_geocoder() -> Geocoder:
    """Geocoding collaborator."""
    return _geocoder


def get_charging_stations() -> Tuple[ChargingStation, ...]:
    """Current charging station snapshot."""
    return list_charging_stations()


def get_ferry_routes() -> Tuple[FerryRoute, ...]:
    """Current ferry timetable snapshot."""
    return list_ferry_routes()


def require_vehicle(vehicle_id: str) -> Vehicle:
    """Resolve a catalog vehicle or raise 404."""
    vehicle = get_vehicle(vehicle_id)
    if vehicle is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Vehicle with ID {vehicle_id} not found",
        )
    return vehicle
