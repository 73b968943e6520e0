"""
Trips API endpoint.
Exposes duration, charging and departure estimates under /api/v1/trips.
"""

import logging
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, status

from elroute.api.deps import get_charging_stations, get_geocoder, require_vehicle
from elroute.schemas.api import (
    ChargingPlanRequest,
    DepartureRequest,
    DurationRequest,
    MandatoryStopRequest,
    MandatoryStopResponse,
)
from elroute.schemas.trip import ChargingPlan, ChargingStation, DurationEstimate, TripEstimate
from elroute.services.catalog import Geocoder
from elroute.services.charging_stop import find_mandatory_charging_stop
from elroute.services.duration import estimate_duration
from elroute.services.energy import plan_charging
from elroute.services.itinerary import recommend_departure
from elroute.services.validation import validate_trip_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["Trips"])


@router.post(
    "/duration",
    response_model=DurationEstimate,
    summary="Estimate travel duration",
    description="Uses curated corridor times where known, otherwise a coarse fallback.",
)
async def post_duration(
    request: DurationRequest,
    geocoder: Geocoder = Depends(get_geocoder),
) -> DurationEstimate:
    """Estimate travel time and distance between two places."""
    return estimate_duration(
        request.from_location,
        request.to_location,
        request.route_type,
        geocoder=geocoder,
        via=request.via,
    )


@router.post(
    "/charging-plan",
    response_model=ChargingPlan,
    summary="Plan charging for a distance",
)
async def post_charging_plan(request: ChargingPlanRequest) -> ChargingPlan:
    """Decide whether charging is required and for how long."""
    vehicle = require_vehicle(request.vehicle_id)
    return plan_charging(
        vehicle,
        request.battery_percentage,
        request.trailer_weight_kg,
        request.distance_km,
        request.route_type,
    )


@router.post(
    "/mandatory-stop",
    response_model=MandatoryStopResponse,
    summary="Find the mandatory charging stop",
    description=(
        "Returns the nearest available station reachable before the battery "
        "drops to the critical floor. Uses the station catalog when the body "
        "has no stations. 409 when no station is reachable."
    ),
)
async def post_mandatory_stop(
    request: MandatoryStopRequest,
    geocoder: Geocoder = Depends(get_geocoder),
    catalog_stations: Tuple[ChargingStation, ...] = Depends(get_charging_stations),
) -> MandatoryStopResponse:
    """Find the first station the vehicle must visit."""
    vehicle = require_vehicle(request.vehicle_id)

    stop = find_mandatory_charging_stop(
        request.from_location,
        request.to_location,
        vehicle,
        request.battery_percentage,
        request.stations if request.stations is not None else catalog_stations,
        geocoder,
        trailer_weight_kg=request.trailer_weight_kg,
        route_type=request.route_type,
    )
    return MandatoryStopResponse(charging_required=stop is not None, stop=stop)


@router.post(
    "/departure",
    response_model=TripEstimate,
    summary="Recommend a departure time",
    description=(
        "Combines driving, charging and buffer time; sets recommended_departure "
        "when desired_arrival is given and mandatory_station when charging is required."
    ),
)
async def post_departure(
    request: DepartureRequest,
    geocoder: Geocoder = Depends(get_geocoder),
    catalog_stations: Tuple[ChargingStation, ...] = Depends(get_charging_stations),
) -> TripEstimate:
    """Estimate the whole trip and when to leave."""
    errors = validate_trip_request(request)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        )

    vehicle = require_vehicle(request.vehicle_id)
    stations = request.stations if request.stations is not None else catalog_stations
    return recommend_departure(request, vehicle, geocoder=geocoder, stations=stations)
