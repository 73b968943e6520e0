"""
Vehicles API endpoint.
Handles GET /api/v1/vehicles for the vehicle catalog.
"""

from typing import List

from fastapi import APIRouter

from elroute.api.deps import require_vehicle
from elroute.schemas.trip import Vehicle
from elroute.services.catalog import list_vehicles

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])


@router.get(
    "",
    response_model=List[Vehicle],
    summary="List catalog vehicles",
)
async def get_vehicles() -> List[Vehicle]:
    """List all vehicles in the catalog."""
    return list(list_vehicles())


@router.get(
    "/{vehicle_id}",
    response_model=Vehicle,
    summary="Get vehicle details",
    description="Returns battery capacity, declared range and consumption.",
)
async def get_vehicle_details(vehicle_id: str) -> Vehicle:
    """Get a catalog vehicle by ID."""
    return require_vehicle(vehicle_id)
